"""
prattcalc - single-line arithmetic calculator built on a Pratt parser.

Lexes, parses and evaluates expressions such as ``-2 * 3 + 1e3 / 4``.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import ConfigError, Diagnostic, DiagnosticKind, PrattcalcError
from .core.expression_lang import Calculation, calculate

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "Calculation",
    "calculate",
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "PrattcalcError",
]
