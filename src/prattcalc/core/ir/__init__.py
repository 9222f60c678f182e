"""Intermediate representation: the expression AST."""

from .expressions import BinaryExpr, Expr, Literal, Operator, UnaryExpr, format_number, render

__all__ = ["BinaryExpr", "Expr", "Literal", "Operator", "UnaryExpr", "format_number", "render"]
