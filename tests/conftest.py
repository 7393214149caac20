from io import StringIO

import pytest

from linus.interpreter import Interpreter
from linus.types.environment import Environment


@pytest.fixture
def env():
    """Fresh, empty environment."""
    return Environment()


@pytest.fixture
def out():
    return StringIO()


@pytest.fixture
def interpreter(out):
    """Interpreter printing into an in-memory buffer."""
    return Interpreter(out)


@pytest.fixture
def run(interpreter, out):
    """Run source and return everything it printed."""
    def _run(source: str) -> str:
        interpreter.run(source)
        return out.getvalue()
    return _run
