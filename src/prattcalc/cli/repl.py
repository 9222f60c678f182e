"""
Interactive read-loop.

Reads one line at a time, runs it through the expression pipeline and
prints the value. A bad line prints its diagnostic and the loop moves on;
only the exit command or end of input stops it.
"""

from __future__ import annotations

import logging

import typer

from prattcalc.cli.utils import console, print_diagnostic
from prattcalc.core.config import CalcConfig
from prattcalc.core.errors import DiagnosticSink
from prattcalc.core.expression_lang import calculate

logger = logging.getLogger(__name__)


def run_repl(config: CalcConfig, sink: DiagnosticSink = print_diagnostic) -> int:
    """
    Run the read-loop until the exit command or end of input.

    Returns:
        Number of lines that produced a value.
    """
    evaluated = 0
    while True:
        try:
            line = console.input(config.prompt, markup=False)
        except EOFError:
            console.print()
            break

        if line == config.exit_command:
            break
        if not line.strip():
            continue

        result = calculate(line, sink)
        if not result.ok or result.value is None:
            logger.debug("Discarding line %r", line)
            continue

        console.print(config.format_value(result.value), markup=False, highlight=False)
        evaluated += 1

    logger.debug("Read-loop finished after %d evaluated lines", evaluated)
    return evaluated


def repl_command(ctx: typer.Context) -> None:
    """Start the interactive calculator. Type the exit command to quit."""
    config: CalcConfig = ctx.obj
    run_repl(config)
