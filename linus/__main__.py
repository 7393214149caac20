import sys

from linus.cli import main

sys.exit(main())
