"""
Expression AST for prattcalc.

A closed set of three node types produced by the Pratt parser and consumed
by the evaluator:
- Literal: a number
- UnaryExpr: +x, -x
- BinaryExpr: x + y, x - y, x * y, x / y

Nodes carry the operator token kind rather than a per-variant operator
type, so a node whose operator does not fit its variant (e.g. a unary ``*``)
can be built and is reported by the evaluator.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operator(StrEnum):
    """Operator carried by unary and binary nodes."""

    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A numeric literal."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return format_number(self.value)


class UnaryExpr(BaseModel):
    """Unary operation: op operand."""

    op: Operator
    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: Operator
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | UnaryExpr | BinaryExpr

# Rebuild models for recursive forward references
UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def format_number(value: float) -> str:
    """Shortest text that reads back as ``value``, without a trailing ``.0``."""
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def render(expr: Expr) -> str:
    """
    Render a tree fully parenthesized: ``(2 + (3 * 4))``, ``-(5)``.

    Walks an explicit stack so arbitrarily deep trees render.
    """
    out: list[str] = []
    pending: list[Expr | str] = [expr]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, Literal):
            out.append(format_number(item.value))
        elif isinstance(item, UnaryExpr):
            pending.extend([")", item.operand, f"{item.op}("])
        else:
            pending.extend([")", item.right, f" {item.op} ", item.left, "("])
    return "".join(out)
