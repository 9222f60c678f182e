"""Core prattcalc functionality: diagnostics, AST, expression language, configuration."""

from . import ir
from .config import CalcConfig, load_config
from .errors import (
    ConfigError,
    Diagnostic,
    DiagnosticKind,
    Diagnostics,
    PrattcalcError,
)

__all__ = [
    "ir",
    "CalcConfig",
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "Diagnostics",
    "PrattcalcError",
    "load_config",
]
