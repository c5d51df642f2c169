"""Z3-backed decisions for comparisons against numeric literals.
The extractor asks two questions about a check ``x OP c`` where ``c`` is a
literal:
- does the check (or its negation) rule out ``x == 0``?
- when ``x`` is a length, what is the smallest length the check allows?
Both are answered by the solver rather than by a hand-written table, so
``x > 0``, ``x >= 1``, ``x != 0`` and ``x < 0`` all protect their then-branch
while ``x >= 0`` correctly protects nothing. Answers depend only on the
operator and the literal, so they are memoised.
"""

from __future__ import annotations

import math
import threading
from functools import lru_cache

import z3

SOLVER_TIMEOUT_MS = 5000

# z3's default context is shared by every thread.
_Z3_LOCK = threading.RLock()

COMPARISON_OPS = frozenset({"==", "!=", "<", "<=", ">", ">="})

FLIPPED = {
    "==": "==",
    "!=": "!=",
    "<": ">",
    "<=": ">=",
    ">": "<",
    ">=": "<=",
}


def _relation(op: str, lhs: z3.ArithRef, rhs: z3.ArithRef) -> z3.BoolRef:
    if op == "==":
        return lhs == rhs
    if op == "!=":
        return lhs != rhs
    if op == "<":
        return lhs < rhs
    if op == "<=":
        return lhs <= rhs
    if op == ">":
        return lhs > rhs
    if op == ">=":
        return lhs >= rhs
    raise ValueError(f"Unsupported comparison: {op}")


def _symbol_and_value(bound: int | float) -> tuple[z3.ArithRef, z3.ArithRef]:
    if isinstance(bound, float):
        numerator, denominator = bound.as_integer_ratio()
        return z3.Real("x"), z3.Q(numerator, denominator)
    return z3.Int("x"), z3.IntVal(bound)


def prove(claim: z3.BoolRef) -> bool:
    """Prove that a claim is always true. ``unknown`` counts as not proven."""
    with _Z3_LOCK:
        solver = z3.Solver()
        solver.set("timeout", SOLVER_TIMEOUT_MS)
        solver.add(z3.Not(claim))
        return solver.check() == z3.unsat


@lru_cache(maxsize=512, typed=True)
def implies_nonzero(op: str, bound: int | float, negate: bool = False) -> bool:
    """Whether ``x OP bound`` (or its negation) implies ``x != 0``."""
    if op not in COMPARISON_OPS:
        return False
    if isinstance(bound, float) and not math.isfinite(bound):
        return False
    with _Z3_LOCK:
        x, value = _symbol_and_value(bound)
        condition = _relation(op, x, value)
        if negate:
            condition = z3.Not(condition)
        return prove(z3.Implies(condition, x != 0))


@lru_cache(maxsize=512, typed=True)
def minimum_length(op: str, bound: int) -> int:
    """Smallest ``n >= 0`` satisfying ``n OP bound``; 0 when unsatisfiable or unknown."""
    if op not in COMPARISON_OPS or not isinstance(bound, int):
        return 0
    with _Z3_LOCK:
        length = z3.Int("len")
        optimizer = z3.Optimize()
        optimizer.set("timeout", SOLVER_TIMEOUT_MS)
        optimizer.add(length >= 0, _relation(op, length, z3.IntVal(bound)))
        optimizer.minimize(length)
        if optimizer.check() != z3.sat:
            return 0
        value = optimizer.model().eval(length, model_completion=True)
        return value.as_long() if z3.is_int_value(value) else 0


__all__ = [
    "COMPARISON_OPS",
    "FLIPPED",
    "SOLVER_TIMEOUT_MS",
    "prove",
    "implies_nonzero",
    "minimum_length",
]
