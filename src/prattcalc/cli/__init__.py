"""
prattcalc CLI.

- repl: interactive read-loop
- eval: evaluate a single expression
- tokens / ast: inspect the scanner and parser output
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from prattcalc.cli.repl import repl_command, run_repl
from prattcalc.cli.show import ast_command, tokens_command
from prattcalc.cli.utils import (
    console,
    print_diagnostic,
    print_error,
    setup_logging,
    version_callback,
)
from prattcalc.core.config import CalcConfig, load_config
from prattcalc.core.errors import ConfigError
from prattcalc.core.expression_lang import calculate

app = typer.Typer(
    help="""prattcalc - arithmetic calculator

Evaluates + - * / over decimal and exponent literals, e.g. 2 + 3 * 4 or -1.5e3 / 2.
Expressions starting with '-' must follow '--': prattcalc eval -- -2-3
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file (default: ./prattcalc.toml if present)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (overrides config and PRATTCALC_LOG_LEVEL)",
    ),
) -> None:
    """Load configuration and set up logging for every command."""
    try:
        config = load_config(config_path, log_level)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1)

    setup_logging(config.log_level)
    ctx.obj = config


@app.command(name="eval")
def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to evaluate"),
) -> None:
    """Evaluate EXPRESSION and print its value."""
    config: CalcConfig = ctx.obj
    result = calculate(expression, print_diagnostic)
    if not result.ok or result.value is None:
        raise typer.Exit(1)
    console.print(config.format_value(result.value), markup=False, highlight=False)


app.command(name="repl")(repl_command)
app.command(name="tokens")(tokens_command)
app.command(name="ast")(ast_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main", "run_repl"]


if __name__ == "__main__":
    main(sys.argv[1:])
