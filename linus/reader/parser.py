"""
  Linus Parser

Recursive descent over a token list with one token of lookahead:

    program     := (NEWLINE | declaration)*
    declaration := 'def' SYMBOL ':' TYPE_DECL '->' expression terminator
                 | expression
    expression  := call
    call        := primary operand*
    operand     := ('$' | '(' | INDENT) expression
                 | operator-led expression
                 | primary

A call stops at ')', DEDENT, NEWLINE or EOF and consumes the first three.
INDENT, '$' and '(' all mean "an expression follows as the next operand",
which is how indented lines become trailing arguments of the call above.

A failing declaration is recorded and parsing resumes at the current
position; every primary consumes a token, so the loop always terminates.
Nesting deeper than the interpreter stack allows is reported the same way.

The token after a declaration body is consumed as its terminator, on top of
the NEWLINE that closes the call, so a `def` line followed directly by
another statement is an error; separate them with a blank line.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from linus.errors import LinusParseError
from linus.reader.ast import Assignment, Expr, FunctionCall, Literal, Operator, Variable
from linus.reader.tokens import LITERAL_TYPES, OPERATOR_TYPES, Token, TokenType

logger = logging.getLogger(__name__)

# Tokens that may follow a call head and begin its operand list
OPERAND_START = frozenset({
    TokenType.SYMBOL,
    TokenType.STR,
    TokenType.NUM,
    TokenType.TRUE,
    TokenType.FALSE,
    TokenType.NONE,
    TokenType.APPL,
    TokenType.INDENT,
    TokenType.LEFT_PAREN,
}) | OPERATOR_TYPES

NESTED_EXPRESSION = frozenset({TokenType.APPL, TokenType.LEFT_PAREN, TokenType.INDENT})
OPERANDS_END = frozenset({TokenType.RIGHT_PAREN, TokenType.DEDENT, TokenType.EOF, TokenType.NEWLINE})
CALL_CLOSE = frozenset({TokenType.RIGHT_PAREN, TokenType.NEWLINE, TokenType.DEDENT})
DECLARATION_END = frozenset({
    TokenType.INDENT,
    TokenType.LEFT_PAREN,
    TokenType.APPL,
    TokenType.NEWLINE,
    TokenType.EOF,
})


def _fail(message: str) -> LinusParseError:
    return LinusParseError([message])


class Parser:
    __slots__ = ("tokens", "pos")

    def __init__(self, tokens: Iterable[Token]):
        self.tokens: tuple[Token, ...] = tuple(tokens)
        self.pos = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def peek_type(self) -> Optional[TokenType]:
        tok = self.peek()
        return tok.type if tok is not None else None

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def parse(self) -> list[Expr]:
        """Parse every top-level declaration, raising once if any of them failed."""
        exprs: list[Expr] = []
        errors: list[str] = []

        while (tok := self.peek()) is not None:
            if tok.type is TokenType.NEWLINE:
                self.advance()
                continue
            try:
                exprs.append(self.declaration())
            except LinusParseError as exc:
                logger.debug("declaration failed at token %d: %s", self.pos, exc)
                errors.extend(exc.messages)
            except RecursionError:
                logger.debug("declaration nested too deeply at token %d", self.pos)
                errors.append("Expression nested too deeply.")

        if errors:
            raise LinusParseError(errors)
        return exprs

    def declaration(self) -> Expr:
        if self.peek_type() is not TokenType.DEF:
            return self.expression()

        self.advance()  # consume 'def'
        name = self.advance()
        if name is None or name.type is not TokenType.SYMBOL:
            raise _fail("Invalid variable name.")

        delim, type_decl, arrow = self.advance(), self.advance(), self.peek()
        if (
            delim is None or delim.type is not TokenType.TYPE_DELIM
            or type_decl is None or type_decl.type is not TokenType.TYPE_DECL
            or arrow is None or arrow.type is not TokenType.ASSIGN
        ):
            raise _fail('Error in global variable declaration: invalid syntax after "def"')
        self.advance()  # consume '->'

        expr = self.expression()
        if self.peek_type() in DECLARATION_END:
            self.advance()
        else:
            raise _fail(
                "Error in global variable declaration: "
                "no expression following variable declaration."
            )
        return Assignment(name=name.value, type_decl=type_decl.value, expr=expr)

    def expression(self) -> Expr:
        return self.function_call()

    def function_call(self) -> Expr:
        expr = self.primary()

        while True:
            tok_type = self.peek_type()
            if tok_type in OPERAND_START:
                operands = self.operands()
                expr = FunctionCall(operator=self._head(expr), operands=tuple(operands))
            elif tok_type in CALL_CLOSE:
                self.advance()
                break
            else:
                break
        return expr

    def operands(self) -> list[Expr]:
        operands: list[Expr] = []
        while True:
            tok_type = self.peek_type()
            if tok_type is None or tok_type in OPERANDS_END:
                break
            if tok_type in NESTED_EXPRESSION:
                self.advance()
                operands.append(self.expression())
            elif tok_type in OPERATOR_TYPES:
                operands.append(self.expression())
            else:
                operands.append(self.primary())
        return operands

    def primary(self) -> Expr:
        tok = self.advance()
        if tok is None:
            raise _fail("Problem advancing parser.")
        if tok.type in LITERAL_TYPES:
            return Literal(tok)
        if tok.type in OPERATOR_TYPES:
            return Operator(tok)
        if tok.type is TokenType.SYMBOL:
            return Variable(tok)
        if tok.type is TokenType.APPL:
            raise _fail("Cannot pass an application symbol ($) there.")
        raise _fail(f"Problem parsing primary: unexpected {tok.type.name}.")

    @staticmethod
    def _head(expr: Expr) -> Token:
        match expr:
            case Variable(name=name):
                return name
            case Operator(token=token):
                return token
        raise _fail("Invalid function name")


def parse(tokens: Iterable[Token]) -> list[Expr]:
    """Parse a token sequence into top-level expression trees."""
    exprs = Parser(tokens).parse()
    logger.debug("parsed %d top-level expressions", len(exprs))
    return exprs
