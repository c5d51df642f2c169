"""E1402: division by zero.
Reports ``/`` and ``%`` (and Python's ``//``) whose divisor is neither a
non-zero literal nor protected by an enclosing zero or emptiness check.
"""

from __future__ import annotations

from guardlint.checkers.base import Checker, Report, Severity
from guardlint.guards.query import is_division_guarded
from guardlint.guards.walker import GuardedWalker
from guardlint.syntax.nodes import Binary

DIVISION_OPS = frozenset({"/", "%", "//"})


class DivisionWalker(GuardedWalker):
    def __init__(self, report: Report):
        super().__init__()
        self.report = report

    def on_binary(self, node: Binary) -> None:
        if node.op not in DIVISION_OPS:
            return
        if not is_division_guarded(self.scope, node.right):
            self.report(node.right.span or node.span)


class DivisionByZeroChecker(Checker):
    """Checker for E1402: Division by zero."""

    code = "E1402"
    name = "Division by zero"
    config_key = "division_by_zero"
    severity = Severity.HIGH
    message = "Division operation without zero check. Will panic if divisor is zero."
    suggestion = (
        "Use checked_div() which returns None for division by zero, "
        "or validate the divisor before dividing."
    )

    def create_walker(self, report: Report) -> DivisionWalker:
        return DivisionWalker(report)


__all__ = ["DIVISION_OPS", "DivisionWalker", "DivisionByZeroChecker"]
