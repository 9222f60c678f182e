"""
Commands that expose the pipeline's intermediate results.

- tokens: the scanner's output
- ast: the parser's tree
"""

from __future__ import annotations

import typer
from rich.table import Table

from prattcalc.cli.utils import console, print_diagnostic
from prattcalc.core.expression_lang.parser import PrattParser
from prattcalc.core.expression_lang.tokenizer import TokenKind, Tokenizer


def tokens_command(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
) -> None:
    """Show the tokens produced for EXPRESSION."""
    tokenizer = Tokenizer(expression, print_diagnostic)
    tokens = tokenizer.lex()

    table = Table(title="Tokens")
    table.add_column("Kind", style="cyan")
    table.add_column("Lexeme")
    table.add_column("Column", justify="right")
    for tok in tokens:
        lexeme = "<eof>" if tok.kind == TokenKind.EOF else tok.lexeme
        table.add_row(tok.kind.value, lexeme, str(tok.pos))
    console.print(table)

    if tokenizer.diagnostics.had_error:
        raise typer.Exit(1)


def ast_command(
    expression: str = typer.Argument(..., help="Expression to parse"),
) -> None:
    """Show the fully parenthesized tree parsed from EXPRESSION."""
    tokenizer = Tokenizer(expression, print_diagnostic)
    tokens = tokenizer.lex()
    if tokenizer.diagnostics.had_error:
        raise typer.Exit(1)

    parser = PrattParser(tokens, print_diagnostic)
    expr = parser.parse()
    if parser.diagnostics.had_error or expr is None:
        raise typer.Exit(1)

    console.print(str(expr), markup=False, highlight=False)
