"""Token vocabulary shared by the lexer, the parser and the evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from linus.types.values import format_number


class TokenType(Enum):
    # Literals
    SYMBOL = auto()
    STR = auto()
    NUM = auto()
    TRUE = auto()
    FALSE = auto()
    NONE = auto()
    # Collections (reserved, never produced by the lexer)
    SEQ = auto()
    HASH = auto()
    GROUP = auto()
    CHOICE = auto()
    # Operators
    ADD = auto()
    SUBTRACT = auto()
    DIVIDE = auto()
    MULTIPLY = auto()
    GREATER_THAN = auto()
    LESS_THAN = auto()
    GREATER_THAN_OR_EQUAL = auto()
    LESS_THAN_OR_EQUAL = auto()
    EQUAL = auto()
    AND = auto()
    OR = auto()
    NOT = auto()
    # Types
    TYPE_DECL = auto()
    TYPE_DELIM = auto()
    # Variables/functions
    DEF = auto()
    ASSIGN = auto()
    ANON_FN = auto()
    # Special expressions
    DO = auto()
    LET = auto()
    IF = auto()
    LOOP = auto()
    # Blocks
    INDENT = auto()
    DEDENT = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    APPL = auto()
    NEWLINE = auto()
    # Exception handling
    TRY = auto()
    CATCH = auto()
    FINALLY = auto()
    THROW = auto()
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """One lexical unit. `value` is set only for SYMBOL, STR, NUM and TYPE_DECL."""

    type: TokenType
    value: Optional[Union[str, float]] = None

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"


# Names that have a dedicated token; anything else becomes a SYMBOL.
KEYWORDS: dict[str, TokenType] = {
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "none": TokenType.NONE,
    "and": TokenType.AND,
    "or": TokenType.OR,
    "not": TokenType.NOT,
    "def": TokenType.DEF,
    "let": TokenType.LET,
    "try": TokenType.TRY,
    "catch": TokenType.CATCH,
    "finally": TokenType.FINALLY,
    "throw": TokenType.THROW,
    "loop": TokenType.LOOP,
    "do": TokenType.DO,
}

TYPE_NAMES = frozenset({"num", "str", "_", "bool"})

OPERATOR_TYPES = frozenset({
    TokenType.ADD,
    TokenType.SUBTRACT,
    TokenType.MULTIPLY,
    TokenType.DIVIDE,
    TokenType.GREATER_THAN,
    TokenType.LESS_THAN,
    TokenType.GREATER_THAN_OR_EQUAL,
    TokenType.LESS_THAN_OR_EQUAL,
    TokenType.EQUAL,
    TokenType.AND,
    TokenType.OR,
    TokenType.NOT,
})

LITERAL_TYPES = frozenset({
    TokenType.NUM,
    TokenType.STR,
    TokenType.TRUE,
    TokenType.FALSE,
    TokenType.NONE,
    TokenType.EOF,
})

# Fixed source text of every token type that carries no payload.
SPELLINGS: dict[TokenType, str] = {
    TokenType.TRUE: "true",
    TokenType.FALSE: "false",
    TokenType.NONE: "none",
    TokenType.ADD: "+",
    TokenType.SUBTRACT: "-",
    TokenType.DIVIDE: "/",
    TokenType.MULTIPLY: "*",
    TokenType.GREATER_THAN: ">",
    TokenType.LESS_THAN: "<",
    TokenType.GREATER_THAN_OR_EQUAL: ">=",
    TokenType.LESS_THAN_OR_EQUAL: "<=",
    TokenType.EQUAL: "=",
    TokenType.AND: "and",
    TokenType.OR: "or",
    TokenType.NOT: "not",
    TokenType.TYPE_DELIM: ":",
    TokenType.DEF: "def",
    TokenType.ASSIGN: "->",
    TokenType.ANON_FN: "\\",
    TokenType.DO: "do",
    TokenType.LET: "let",
    TokenType.LOOP: "loop",
    TokenType.LEFT_PAREN: "(",
    TokenType.RIGHT_PAREN: ")",
    TokenType.APPL: "$",
    TokenType.NEWLINE: "\n",
    TokenType.TRY: "try",
    TokenType.CATCH: "catch",
    TokenType.FINALLY: "finally",
    TokenType.THROW: "throw",
    TokenType.EOF: "",
}


def spell(token: Token) -> str:
    """Return source text that lexes back to `token`.

    INDENT and DEDENT depend on the surrounding layout and the reserved
    collection/`if` tokens are never produced by the lexer, so they have no
    spelling of their own.
    """
    if token.type is TokenType.NUM:
        return format_number(token.value)
    if token.type in (TokenType.SYMBOL, TokenType.STR, TokenType.TYPE_DECL):
        return token.value
    try:
        return SPELLINGS[token.type]
    except KeyError:
        raise ValueError(f"{token.type.name} has no source spelling") from None
