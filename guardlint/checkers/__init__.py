"""Rule checkers built on the guard analysis."""

from guardlint.checkers.base import Checker, Severity, Sink, Violation
from guardlint.checkers.division import DivisionByZeroChecker
from guardlint.checkers.indexing import UncheckedIndexingChecker
from guardlint.checkers.registry import CheckerRegistry, default_registry

__all__ = [
    "Checker",
    "CheckerRegistry",
    "DivisionByZeroChecker",
    "Severity",
    "Sink",
    "UncheckedIndexingChecker",
    "Violation",
    "default_registry",
]
