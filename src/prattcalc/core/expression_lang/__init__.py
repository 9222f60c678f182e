"""
prattcalc expression language.

Tokenizer, Pratt parser and evaluator for single-line arithmetic
expressions, plus ``calculate`` which runs all three stages and stops at
the first stage that records a diagnostic.

Usage:
    from prattcalc.core.expression_lang import calculate

    result = calculate("2 + 3 * 4")
    # result.value == 14.0
"""

from __future__ import annotations

from dataclasses import dataclass

from prattcalc.core.errors import Diagnostic, DiagnosticSink
from prattcalc.core.expression_lang.evaluator import Evaluator, evaluate
from prattcalc.core.expression_lang.parser import PrattParser, Precedence, parse_tokens
from prattcalc.core.expression_lang.tokenizer import Token, TokenKind, Tokenizer, tokenize
from prattcalc.core.ir.expressions import Expr


@dataclass(frozen=True)
class Calculation:
    """Outcome of running one line through the pipeline."""

    source: str
    tokens: list[Token]
    expr: Expr | None = None
    value: float | None = None
    diagnostic: Diagnostic | None = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None


def calculate(source: str, sink: DiagnosticSink | None = None) -> Calculation:
    """
    Lex, parse and evaluate one line.

    Each stage runs only if the previous one recorded no diagnostic.

    Args:
        source: Expression text (e.g., "1e3 - 2 * 4")
        sink: Called with each diagnostic as soon as it is recorded.
            Defaults to logging.

    Returns:
        Calculation with the value, or with the diagnostic of the stage
        that failed.
    """
    tokenizer = Tokenizer(source, sink)
    tokens = tokenizer.lex()
    if tokenizer.diagnostics.had_error:
        return Calculation(source, tokens, diagnostic=tokenizer.diagnostics.diagnostic)

    parser = PrattParser(tokens, sink)
    expr = parser.parse()
    if parser.diagnostics.had_error or expr is None:
        return Calculation(source, tokens, diagnostic=parser.diagnostics.diagnostic)

    evaluator = Evaluator(sink)
    value = evaluator.evaluate(expr)
    if evaluator.diagnostics.had_error:
        return Calculation(source, tokens, expr, diagnostic=evaluator.diagnostics.diagnostic)

    return Calculation(source, tokens, expr, value)


__all__ = [
    "Calculation",
    "Evaluator",
    "PrattParser",
    "Precedence",
    "Token",
    "TokenKind",
    "Tokenizer",
    "calculate",
    "evaluate",
    "parse_tokens",
    "tokenize",
]
