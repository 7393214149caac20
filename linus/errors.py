class LinusError(Exception):
    """ Base class for all Linus errors"""
    pass

class LinusLexError(LinusError):
    """ Raised when source text cannot be split into tokens"""

class LinusParseError(LinusError):
    """ Raised once at the end of parsing when any declaration failed"""

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))

class LinusRuntimeError(LinusError):
    """ Raised when evaluation fails for a reason without a narrower class"""

class LinusTypeError(LinusRuntimeError):
    """ Raised when an operator is applied to operands of mismatched types"""

class LinusNameError(LinusRuntimeError):
    """ Raised when a variable is used before it is defined"""

class LinusUndefinedFunctionError(LinusRuntimeError):
    """ Raised when a call head is not a known function"""

class LinusArityError(LinusRuntimeError):
    """ Raised when a function receives too few arguments"""

class LinusInvalidExpressionError(LinusRuntimeError):
    """ Raised when a tree node cannot be evaluated"""
