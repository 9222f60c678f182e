"""
Error types and diagnostics for prattcalc.

Malformed input is never reported by raising. Each pipeline stage owns a
``Diagnostics`` object, records a structured ``Diagnostic`` into it, and the
caller checks ``had_error`` before handing the stage's output to the next
stage. Exceptions are reserved for programming and configuration errors.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

logger = logging.getLogger("prattcalc.diagnostics")


class PrattcalcError(Exception):
    """Base exception for all prattcalc errors."""


class ConfigError(PrattcalcError):
    """
    Raised when configuration cannot be loaded.

    Examples:
    - Explicit config path that does not exist
    - Malformed TOML
    - Values that fail validation
    """


class DiagnosticKind(StrEnum):
    """Which stage a diagnostic came from."""

    LEXICAL = "lexical"
    SYNTAX = "syntax"
    SEMANTIC = "semantic"


@dataclass(frozen=True)
class Diagnostic:
    """
    A recoverable error recorded by one pipeline stage.

    Attributes:
        kind: Stage that produced the diagnostic
        message: Short description, without location
        column: 0-based column in the input line, when known
        lexeme: Offending text, when there is one
    """

    kind: DiagnosticKind
    message: str
    column: int | None = None
    lexeme: str | None = None

    def format(self) -> str:
        """
        Format the diagnostic for display.

        Returns:
            String like: "Lexical error at column 2: unexpected character '&'"
        """
        location = f" at column {self.column}" if self.column is not None else ""
        return f"{self.kind.value.capitalize()} error{location}: {self.message}"

    def __str__(self) -> str:
        return self.format()


DiagnosticSink = Callable[[Diagnostic], None]


def log_sink(diagnostic: Diagnostic) -> None:
    """Default sink: emit the diagnostic through logging."""
    logger.warning("%s", diagnostic.format())


class Diagnostics:
    """Error state owned by a single stage: a sticky flag plus the first diagnostic."""

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self._sink = sink or log_sink
        self._diagnostic: Diagnostic | None = None

    @property
    def had_error(self) -> bool:
        return self._diagnostic is not None

    @property
    def diagnostic(self) -> Diagnostic | None:
        """First diagnostic recorded, if any."""
        return self._diagnostic

    def record(self, diagnostic: Diagnostic) -> None:
        """Emit the diagnostic right away and mark this stage as errored."""
        self._sink(diagnostic)
        if self._diagnostic is None:
            self._diagnostic = diagnostic

    def __repr__(self) -> str:
        return f"Diagnostics(had_error={self.had_error}, diagnostic={self._diagnostic!r})"


def lexical_error(message: str, column: int, lexeme: str) -> Diagnostic:
    """Helper to create a lexical diagnostic."""
    return Diagnostic(DiagnosticKind.LEXICAL, message, column=column, lexeme=lexeme)


def syntax_error(message: str, column: int | None = None, lexeme: str | None = None) -> Diagnostic:
    """Helper to create a syntax diagnostic."""
    return Diagnostic(DiagnosticKind.SYNTAX, message, column=column, lexeme=lexeme)


def semantic_error(message: str) -> Diagnostic:
    """Helper to create a semantic diagnostic."""
    return Diagnostic(DiagnosticKind.SEMANTIC, message)
