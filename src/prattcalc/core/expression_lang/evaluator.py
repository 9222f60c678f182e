"""
Expression evaluator for the prattcalc expression language.

Reduces an expression tree to a single float with a post-order walk over
an explicit stack, so tree depth is bounded by memory rather than the
interpreter's recursion limit. Pure: no I/O, no shared state beyond the
evaluator's own diagnostics.
"""

from __future__ import annotations

import logging
import math
from typing import assert_never

from prattcalc.core.errors import DiagnosticSink, Diagnostics, semantic_error
from prattcalc.core.ir.expressions import BinaryExpr, Expr, Literal, Operator, UnaryExpr

logger = logging.getLogger(__name__)


class Evaluator:
    """Tree-walking interpreter over the closed set of AST node types."""

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self.diagnostics = Diagnostics(sink)

    def evaluate(self, expr: Expr) -> float:
        """
        Evaluate an expression tree.

        Returns:
            The computed value. A node whose operator does not fit its
            variant records a semantic diagnostic and yields NaN.
        """
        value = self._interpret(expr)
        logger.debug("Evaluated %s = %r", expr, value)
        return value

    def _interpret(self, expr: Expr) -> float:
        values: list[float] = []
        # (node, children already evaluated)
        pending: list[tuple[Expr, bool]] = [(expr, False)]

        while pending:
            node, expanded = pending.pop()

            if isinstance(node, Literal):
                values.append(node.value)
            elif isinstance(node, UnaryExpr):
                if expanded:
                    values.append(self._apply_unary(node.op, values.pop()))
                else:
                    pending.append((node, True))
                    pending.append((node.operand, False))
            elif isinstance(node, BinaryExpr):
                if expanded:
                    right = values.pop()
                    left = values.pop()
                    values.append(self._apply_binary(node.op, left, right))
                else:
                    pending.append((node, True))
                    pending.append((node.right, False))
                    pending.append((node.left, False))
            else:
                assert_never(node)

        return values.pop()

    def _apply_unary(self, op: Operator, operand: float) -> float:
        if op == Operator.PLUS:
            return operand
        if op == Operator.MINUS:
            return -operand
        self.diagnostics.record(semantic_error(f"invalid unary operator {str(op)!r}"))
        return math.nan

    def _apply_binary(self, op: Operator, left: float, right: float) -> float:
        if op == Operator.PLUS:
            return left + right
        if op == Operator.MINUS:
            return left - right
        if op == Operator.STAR:
            return left * right
        if op == Operator.SLASH:
            return _divide(left, right)

        self.diagnostics.record(semantic_error(f"invalid binary operator {str(op)!r}"))
        return math.nan


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity and 0/0 is NaN."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        # -0.0 as divisor flips the sign
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def evaluate(expr: Expr, sink: DiagnosticSink | None = None) -> tuple[float, Diagnostics]:
    """Evaluate a tree with a fresh evaluator and return its value and diagnostics."""
    evaluator = Evaluator(sink)
    value = evaluator.evaluate(expr)
    return value, evaluator.diagnostics
