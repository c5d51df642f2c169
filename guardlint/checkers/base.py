"""Base classes for rule checkers and the diagnostics they produce."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from guardlint.guards.walker import GuardedWalker
from guardlint.syntax.nodes import Node, Span


class Severity(Enum):
    """How serious a violation is."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Violation:
    """A single diagnostic reported by a checker."""

    code: str
    name: str
    severity: Severity
    message: str
    file_path: str
    line: int
    column: int
    suggestion: str | None = None

    def format(self) -> str:
        """Format violation for display."""
        text = f"{self.file_path}:{self.line}:{self.column}: {self.code} {self.message}"
        if self.suggestion:
            text += f"\n  suggestion: {self.suggestion}"
        return text

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "name": self.name,
            "severity": self.severity.value,
            "message": self.message,
            "file_path": self.file_path,
            "line": self.line,
            "column": self.column,
            "suggestion": self.suggestion,
        }


Sink = Callable[[Violation], None]
Report = Callable[[Span | None], None]


class Checker(ABC):
    """Base class for flow-sensitive rule checkers.
    A checker supplies a ``GuardedWalker`` whose hooks call ``report`` for
    every unprotected site. Checkers keep no state between ``check`` calls.
    """

    code: str = "E0000"
    name: str = "base"
    config_key: str = ""
    severity: Severity = Severity.HIGH
    message: str = ""
    suggestion: str | None = None

    @abstractmethod
    def create_walker(self, report: Report) -> GuardedWalker:
        """Return a walker that calls ``report`` at each unprotected site."""

    def violation(self, span: Span | None, file_path: str) -> Violation:
        line, column = (span.line, span.column) if span is not None else (0, 0)
        return Violation(
            code=self.code,
            name=self.name,
            severity=self.severity,
            message=self.message,
            file_path=file_path,
            line=line,
            column=column,
            suggestion=self.suggestion,
        )

    def check(self, tree: Node, file_path: str = "<source>", sink: Sink | None = None) -> list[Violation]:
        """Walk ``tree`` and return its violations, also passing each to ``sink``."""
        violations: list[Violation] = []

        def report(span: Span | None) -> None:
            violation = self.violation(span, file_path)
            violations.append(violation)
            if sink is not None:
                sink(violation)

        self.create_walker(report).visit(tree)
        return violations


__all__ = ["Severity", "Violation", "Sink", "Report", "Checker"]
