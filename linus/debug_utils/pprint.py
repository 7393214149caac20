from typing import Optional

from linus.reader.ast import Assignment, FunctionCall, Literal, Operator, Variable
from linus.reader.tokens import LITERAL_TYPES, OPERATOR_TYPES, Token, TokenType, spell

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_DEF = "\033[90m"
COLOR_OPERATOR = "\033[95m"
COLOR_NAME = "\033[94m"
COLOR_LITERAL = "\033[92m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "color": False,
}


# ----------------- Colorize utility -----------------
def colorize(token: Token, options: dict = DEFAULT_OPTIONS) -> str:
    text = spell(token)
    if not options.get("color", False):
        return text
    if token.type in OPERATOR_TYPES:
        return f"{COLOR_OPERATOR}{text}{RESET}"
    if token.type in LITERAL_TYPES:
        return f"{COLOR_LITERAL}{text}{RESET}"
    if token.type is TokenType.SYMBOL:
        return f"{COLOR_NAME}{text}{RESET}"
    return text


def format_token(token: Token) -> str:
    """One token as TYPE or TYPE(payload), for token dumps."""
    if token.value is None:
        return token.type.name
    return f"{token.type.name}({token.value!r})"


def _def_keyword(options: dict) -> str:
    return f"{COLOR_DEF}def{RESET}" if options.get("color", False) else "def"


# ----------------- Pretty printer -----------------
def format_expr(expr, options: dict = DEFAULT_OPTIONS) -> str:
    """Render a tree on one line as parenthesized prefix text."""
    match expr:
        case Assignment(name=name, type_decl=type_decl, expr=inner):
            return f"({_def_keyword(options)} {name}: {type_decl} {format_expr(inner, options)})"
        case FunctionCall(operator=head, operands=operands):
            parts = [colorize(head, options)]
            parts.extend(format_expr(operand, options) for operand in operands)
            return "(" + " ".join(parts) + ")"
        case Literal(token=token) | Operator(token=token) | Variable(name=token):
            return colorize(token, options)
    raise TypeError(f"not an expression tree: {expr!r}")


def pprint_expr(expr, indent: int = 0, options: Optional[dict] = None) -> str:
    """Render a tree, breaking calls that do not fit the line width.

    A broken call keeps its head on the first line and puts each operand on
    its own line one level deeper.
    """
    if options is None:
        options = DEFAULT_OPTIONS
    single_line = format_expr(expr, options)
    if len(single_line) + indent * 2 <= options.get("max_line_length", 80):
        return single_line

    pad = "  " * (indent + 1)
    match expr:
        case Assignment(name=name, type_decl=type_decl, expr=inner):
            body = pprint_expr(inner, indent + 1, options)
            return f"({_def_keyword(options)} {name}: {type_decl}\n{pad}{body})"
        case FunctionCall(operator=head, operands=operands) if operands:
            lines = ["(" + colorize(head, options)]
            lines.extend(pad + pprint_expr(operand, indent + 1, options) for operand in operands)
            lines[-1] += ")"
            return "\n".join(lines)
    return single_line
