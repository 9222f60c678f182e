"""
prattcalc CLI utilities.

Shared consoles, logging setup and the version option.
"""

from __future__ import annotations

import logging
import platform

import typer
from rich.console import Console
from rich.markup import escape

from prattcalc._version import get_version
from prattcalc.core.errors import Diagnostic

console = Console()
err_console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str) -> None:
    """Configure root logging once for the CLI process."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
    logging.getLogger("prattcalc").setLevel(level.upper())


def print_diagnostic(diagnostic: Diagnostic) -> None:
    """Diagnostic sink for the CLI: write to stderr as soon as it is recorded."""
    err_console.print(f"[red]{escape(diagnostic.format())}[/red]", highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red]Error: {escape(message)}[/red]", highlight=False)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"prattcalc version {get_version()}")
        typer.echo(
            f"Python {platform.python_implementation()} {platform.python_version()}"
            f" on {platform.system()} {platform.machine()}"
        )
        raise typer.Exit()
