"""
Pratt (operator-precedence) parser for the prattcalc expression language.

Every token kind maps to a ParseRule: a binding precedence plus the
behaviour to run when the token appears in prefix position (where an
operand is expected) and in infix position (between two operands).

Precedence, low to high:
    NONE     EOF
    TERM     binary + -
    FACTOR   binary * /
    UNARY    prefix + -
    PRIMARY  number

Binary operators parse their right operand one level above their own
precedence, so operators of equal precedence associate to the left. Unary
operators parse their operand at UNARY, so ``--5`` and ``-2*3`` read as
``-(-5)`` and ``(-2)*3``. Grouping with parentheses is not part of the
language.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from prattcalc.core.errors import DiagnosticSink, Diagnostics, syntax_error
from prattcalc.core.expression_lang.tokenizer import Token, TokenKind
from prattcalc.core.ir.expressions import BinaryExpr, Expr, Literal, Operator, UnaryExpr

logger = logging.getLogger(__name__)


class Precedence(IntEnum):
    """Binding power of a token, ordered weakest to strongest."""

    NONE = 0
    TERM = 1
    FACTOR = 2
    UNARY = 3
    PRIMARY = 4


PrefixFn = Callable[[Token], Expr | None]
InfixFn = Callable[[Token, Expr], Expr | None]


@dataclass(frozen=True)
class ParseRule:
    """How a token kind behaves in prefix and infix position."""

    precedence: Precedence
    prefix: PrefixFn | None = None
    infix: InfixFn | None = None


_OPERATORS: dict[TokenKind, Operator] = {
    TokenKind.PLUS: Operator.PLUS,
    TokenKind.MINUS: Operator.MINUS,
    TokenKind.STAR: Operator.STAR,
    TokenKind.SLASH: Operator.SLASH,
}


def _describe(tok: Token) -> str:
    if tok.kind == TokenKind.EOF:
        return "end of input"
    return repr(tok.lexeme)


class PrattParser:
    """Builds one expression tree from an EOF-terminated token sequence."""

    def __init__(self, tokens: list[Token], sink: DiagnosticSink | None = None) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("token sequence must end with an EOF token")
        self.tokens = tokens
        self.pos = 0
        self.diagnostics = Diagnostics(sink)
        self.rules = self._build_rules()

    def _build_rules(self) -> dict[TokenKind, ParseRule]:
        return {
            TokenKind.NUMBER: ParseRule(Precedence.PRIMARY, prefix=self._literal),
            TokenKind.PLUS: ParseRule(Precedence.TERM, prefix=self._unary, infix=self._binary),
            TokenKind.MINUS: ParseRule(Precedence.TERM, prefix=self._unary, infix=self._binary),
            TokenKind.STAR: ParseRule(Precedence.FACTOR, infix=self._binary),
            TokenKind.SLASH: ParseRule(Precedence.FACTOR, infix=self._binary),
            TokenKind.EOF: ParseRule(Precedence.NONE),
        }

    # -- Token cursor --

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        """Consume the current token; never moves past EOF."""
        tok = self.tokens[self.pos]
        if tok.kind != TokenKind.EOF:
            self.pos += 1
        return tok

    def rule(self, kind: TokenKind) -> ParseRule:
        return self.rules[kind]

    # -- Entry points --

    def parse(self) -> Expr | None:
        """
        Parse the whole token sequence.

        Returns:
            The expression tree, or None once a syntax diagnostic has been
            recorded. Check ``diagnostics.had_error`` before using the result.
        """
        expr = self.expression()
        if expr is not None:
            logger.debug("Parsed %s", expr)
        return expr

    def expression(self) -> Expr | None:
        return self.parse_precedence(Precedence.TERM)

    def parse_precedence(self, precedence: Precedence) -> Expr | None:
        """Parse an expression whose operators bind at least as tightly as ``precedence``."""
        tok = self.advance()
        prefix = self.rule(tok.kind).prefix
        if prefix is None:
            self.diagnostics.record(
                syntax_error(f"expected an expression, got {_describe(tok)}", tok.pos, tok.lexeme)
            )
            return None

        expr = prefix(tok)
        if expr is None:
            return None

        while precedence <= self.rule(self.peek().kind).precedence:
            tok = self.advance()
            infix = self.rule(tok.kind).infix
            if infix is None:
                self.diagnostics.record(
                    syntax_error(f"expected an operator, got {_describe(tok)}", tok.pos, tok.lexeme)
                )
                return None
            expr = infix(tok, expr)
            if expr is None:
                return None

        return expr

    # -- Prefix and infix behaviours --

    def _literal(self, tok: Token) -> Expr | None:
        return Literal(value=float(tok.lexeme))

    def _unary(self, tok: Token) -> Expr | None:
        # A run of signs is consumed here rather than one recursion per sign
        ops = [_OPERATORS[tok.kind]]
        while self.peek().kind in (TokenKind.PLUS, TokenKind.MINUS):
            ops.append(_OPERATORS[self.advance().kind])

        operand = self.parse_precedence(Precedence.UNARY)
        if operand is None:
            return None
        for op in reversed(ops):
            operand = UnaryExpr(op=op, operand=operand)
        return operand

    def _binary(self, tok: Token, left: Expr) -> Expr | None:
        right = self.parse_precedence(Precedence(self.rule(tok.kind).precedence + 1))
        if right is None:
            return None
        return BinaryExpr(op=_OPERATORS[tok.kind], left=left, right=right)


def parse_tokens(
    tokens: list[Token], sink: DiagnosticSink | None = None
) -> tuple[Expr | None, Diagnostics]:
    """Parse a token sequence with a fresh parser and return its tree and diagnostics."""
    parser = PrattParser(tokens, sink)
    expr = parser.parse()
    return expr, parser.diagnostics
