"""
  Linus Lexer

Single left-to-right scan with one character of lookahead:

    - a newline followed by a space or tab       -> INDENT
    - a newline ending an indented run of lines  -> DEDENT
    - any other newline                          -> NEWLINE
    - "..."                                      -> STR (quotes kept)
    - # ...                                      -> skipped, newline included
    - digits and '.'                             -> NUM
    - anything else up to whitespace, '#', ':' or ')' -> keyword, type name or SYMBOL

The scan never fails except on numeric text that is not a float.
An unterminated string runs to the end of the source.
"""

from __future__ import annotations

import logging
from typing import Optional

from linus.errors import LinusLexError
from linus.reader.tokens import KEYWORDS, TYPE_NAMES, Token, TokenType

logger = logging.getLogger(__name__)

PUNCTUATION: dict[str, TokenType] = {
    ":": TokenType.TYPE_DELIM,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "$": TokenType.APPL,
    "\\": TokenType.ANON_FN,
}

ARITHMETIC: dict[str, TokenType] = {
    "+": TokenType.ADD,
    "-": TokenType.SUBTRACT,
    "/": TokenType.DIVIDE,
    "*": TokenType.MULTIPLY,
}

INDENT_CHARS = frozenset(" \t")
SKIPPED_CHARS = frozenset(" \t\r")
WORD_STOP_CHARS = frozenset("#:)")


class Lexer:
    """Scan state for one source string: position, indentation flag and output."""

    __slots__ = ("source", "pos", "indented", "tokens")

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.indented = False
        self.tokens: list[Token] = []

    def peek(self) -> Optional[str]:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def advance(self) -> Optional[str]:
        ch = self.peek()
        if ch is not None:
            self.pos += 1
        return ch

    def emit(self, token_type: TokenType, value=None) -> None:
        self.tokens.append(Token(token_type, value))

    def split_tokens(self) -> list[Token]:
        while (ch := self.advance()) is not None:
            if ch == "\n":
                self._newline()
            elif ch in SKIPPED_CHARS:
                continue
            elif ch == '"':
                self._string()
            elif ch == "#":
                self._comment()
            elif ch in PUNCTUATION:
                self.emit(PUNCTUATION[ch])
            elif ch == "-" and self.peek() == ">":
                self.advance()
                self.emit(TokenType.ASSIGN)
            elif ch in ARITHMETIC:
                self.emit(ARITHMETIC[ch])
            elif ch in "><":
                self._comparison(ch)
            elif ch == "=":
                self.emit(TokenType.EQUAL)
            elif "0" <= ch <= "9":
                self._number()
            else:
                self._word()
        self.emit(TokenType.EOF)
        return self.tokens

    # ----------------------
    # Scanners, each entered with the first character already consumed
    # ----------------------
    def _newline(self) -> None:
        nxt = self.peek()
        if nxt is not None and nxt in INDENT_CHARS:
            self.indented = True
            self.emit(TokenType.INDENT)
        elif self.indented:
            self.indented = False
            self.emit(TokenType.DEDENT)
        else:
            self.emit(TokenType.NEWLINE)

    def _string(self) -> None:
        start = self.pos - 1
        while (ch := self.advance()) is not None:
            if ch == '"':
                break
        self.emit(TokenType.STR, self.source[start:self.pos])

    def _comment(self) -> None:
        while (ch := self.advance()) is not None:
            if ch == "\n":
                break

    def _comparison(self, ch: str) -> None:
        if self.peek() == "=":
            self.advance()
            self.emit(TokenType.GREATER_THAN_OR_EQUAL if ch == ">" else TokenType.LESS_THAN_OR_EQUAL)
        else:
            self.emit(TokenType.GREATER_THAN if ch == ">" else TokenType.LESS_THAN)

    def _number(self) -> None:
        start = self.pos - 1
        while (nxt := self.peek()) is not None and ("0" <= nxt <= "9" or nxt == "."):
            self.advance()
        text = self.source[start:self.pos]
        try:
            self.emit(TokenType.NUM, float(text))
        except ValueError:
            raise LinusLexError(f"Invalid numeric literal {text!r} at offset {start}") from None

    def _word(self) -> None:
        start = self.pos - 1
        while (nxt := self.peek()) is not None and not (nxt.isspace() or nxt in WORD_STOP_CHARS):
            self.advance()
        word = self.source[start:self.pos]
        if word in KEYWORDS:
            self.emit(KEYWORDS[word])
        elif word in TYPE_NAMES:
            self.emit(TokenType.TYPE_DECL, word)
        else:
            self.emit(TokenType.SYMBOL, word)


def tokenize(source: str) -> list[Token]:
    """Split `source` into tokens, always ending with a single EOF token."""
    tokens = Lexer(source).split_tokens()
    logger.debug("lexed %d characters into %d tokens", len(source), len(tokens))
    return tokens
