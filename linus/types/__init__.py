from linus.types.environment import Environment
from linus.types.values import NONE, Bool, Function, Num, Str
