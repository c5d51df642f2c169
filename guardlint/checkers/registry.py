"""Registry of available checkers."""

from __future__ import annotations

from guardlint.checkers.base import Checker
from guardlint.checkers.division import DivisionByZeroChecker
from guardlint.checkers.indexing import UncheckedIndexingChecker
from guardlint.config import CheckerConfig


class CheckerRegistry:
    """Maps rule codes to checker classes and builds fresh instances."""

    def __init__(self):
        self._checkers: dict[str, type[Checker]] = {}
        self.register(DivisionByZeroChecker)
        self.register(UncheckedIndexingChecker)

    def register(self, checker_class: type[Checker]) -> None:
        """Register a checker class under its code."""
        self._checkers[checker_class.code] = checker_class

    def get(self, code: str) -> Checker | None:
        checker_class = self._checkers.get(code)
        return checker_class() if checker_class is not None else None

    def enabled(self, config: CheckerConfig | None = None) -> list[Checker]:
        """Fresh instances of every checker switched on in ``config``."""
        config = config or CheckerConfig()
        return [
            checker_class()
            for checker_class in self._checkers.values()
            if getattr(config, checker_class.config_key, True)
        ]

    def list_available(self) -> list[str]:
        return list(self._checkers)


default_registry = CheckerRegistry()


__all__ = ["CheckerRegistry", "default_registry"]
