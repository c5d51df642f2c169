"""Expression normalization and literal/shape predicates.
Keys are purely syntactic: two expressions are "the same" when their
rendered text matches once whitespace is removed. Nothing here evaluates an
expression.
"""

from __future__ import annotations

from guardlint.syntax.nodes import (
    Cast,
    Expr,
    Literal,
    LiteralKind,
    MethodCall,
    Name,
    Paren,
    Range,
    Unary,
)
from guardlint.syntax.render import render

NormalizedKey = str


def normalize(expr: Expr) -> NormalizedKey:
    """Canonical whitespace-free key of ``expr``."""
    return "".join(render(expr).split())


def _strip_parens(expr: Expr) -> Expr:
    while isinstance(expr, Paren):
        expr = expr.inner
    return expr


def literal_value(expr: Expr) -> int | float | None:
    """Numeric value of an int/float literal, through parens and a unary minus."""
    expr = _strip_parens(expr)
    if isinstance(expr, Unary) and expr.op == "-":
        value = literal_value(expr.operand)
        return -value if value is not None else None
    if isinstance(expr, Literal) and expr.is_numeric:
        return expr.value
    return None


def is_zero_literal(expr: Expr) -> bool:
    expr = _strip_parens(expr)
    return isinstance(expr, Literal) and expr.is_numeric and expr.value == 0


def is_nonzero_literal(expr: Expr) -> bool:
    expr = _strip_parens(expr)
    return isinstance(expr, Literal) and expr.is_numeric and expr.value != 0


def is_constant_shape(expr: Expr) -> bool:
    """Integer literals and SCREAMING_CASE identifiers (named constants)."""
    if isinstance(expr, Literal):
        return expr.kind is LiteralKind.INT
    if isinstance(expr, Name):
        ident = expr.ident
        return any(c.isalpha() for c in ident) and all(c.isupper() or c == "_" for c in ident)
    return False


def range_start(expr: Expr) -> int:
    """Literal start bound of a range; 0 when absent or not a literal."""
    if not isinstance(expr, Range) or expr.start is None:
        return 0
    start = _strip_parens(expr.start)
    if isinstance(start, Literal) and start.kind is LiteralKind.INT and start.value >= 0:
        return start.value
    return 0


def length_receiver(expr: Expr) -> Expr | None:
    """``R`` for an ``R.len()`` call, otherwise None."""
    expr = _strip_parens(expr)
    if isinstance(expr, MethodCall) and expr.method == "len" and not expr.args:
        return expr.receiver
    return None


def peel(expr: Expr) -> Expr:
    """Strip parentheses and numeric casts (``(n as f64)`` becomes ``n``)."""
    while isinstance(expr, (Paren, Cast)):
        expr = expr.inner if isinstance(expr, Paren) else expr.value
    return expr


__all__ = [
    "NormalizedKey",
    "normalize",
    "literal_value",
    "is_zero_literal",
    "is_nonzero_literal",
    "is_constant_shape",
    "range_start",
    "length_receiver",
    "peel",
]
