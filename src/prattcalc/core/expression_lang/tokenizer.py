"""
Tokenizer for the prattcalc expression language.

Converts an input line into a sequence of typed tokens terminated by EOF.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum, auto

from prattcalc.core.errors import DiagnosticSink, Diagnostics, lexical_error

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for the expression language."""

    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # End of input
    EOF = auto()


EOF_LEXEME = "\0"


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the expression tokenizer."""

    kind: TokenKind
    lexeme: str
    pos: int

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.lexeme!r}, pos={self.pos})"


_DIGITS = frozenset("0123456789")

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
}


class Tokenizer:
    """Single left-to-right pass over one input line."""

    def __init__(self, source: str, sink: DiagnosticSink | None = None) -> None:
        self.source = source
        self.diagnostics = Diagnostics(sink)

    def lex(self) -> list[Token]:
        """
        Tokenize the source line.

        On an illegal character or malformed number a lexical diagnostic is
        recorded and the tokens read so far are returned without an EOF token.
        """
        source = self.source
        tokens: list[Token] = []
        i = 0
        n = len(source)

        while i < n:
            c = source[i]

            if c.isspace():
                i += 1
                continue

            if c in _DIGITS:
                end = self._scan_number(i)
                if end is None:
                    return tokens
                tokens.append(Token(TokenKind.NUMBER, source[i:end], i))
                i = end
                continue

            kind = _SINGLE_CHAR.get(c)
            if kind is None:
                self.diagnostics.record(lexical_error(f"unexpected character {c!r}", i, c))
                return tokens

            tokens.append(Token(kind, c, i))
            i += 1

        tokens.append(Token(TokenKind.EOF, EOF_LEXEME, n))
        logger.debug("Lexed %d tokens from %r", len(tokens), source)
        return tokens

    def _scan_number(self, start: int) -> int | None:
        """Return the end of the number starting at ``start``, or None if malformed."""
        source = self.source
        i = _skip_digits(source, start)

        if i < len(source) and source[i] == ".":
            i = _skip_digits(source, i + 1)

        if i < len(source) and source[i] == "e":
            i += 1
            if i < len(source) and source[i] in "+-":
                i += 1
            exponent_start = i
            i = _skip_digits(source, i)
            if i == exponent_start:
                lexeme = source[start:i]
                self.diagnostics.record(
                    lexical_error(f"malformed number {lexeme!r}", start, lexeme)
                )
                return None

        return i


def _skip_digits(source: str, i: int) -> int:
    while i < len(source) and source[i] in _DIGITS:
        i += 1
    return i


def tokenize(source: str, sink: DiagnosticSink | None = None) -> tuple[list[Token], Diagnostics]:
    """Tokenize a line with a fresh tokenizer and return its tokens and diagnostics."""
    tokenizer = Tokenizer(source, sink)
    tokens = tokenizer.lex()
    return tokens, tokenizer.diagnostics
