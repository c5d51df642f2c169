"""E1408: unchecked indexing.
Reports ``v[i]`` and ``v[a..b]`` unless the index is a constant or an
enclosing length check covers it.
"""

from __future__ import annotations

from guardlint.checkers.base import Checker, Report, Severity
from guardlint.guards.query import is_index_guarded
from guardlint.guards.walker import GuardedWalker
from guardlint.syntax.nodes import Index


class IndexingWalker(GuardedWalker):
    def __init__(self, report: Report):
        super().__init__()
        self.report = report

    def on_index(self, node: Index) -> None:
        if not is_index_guarded(self.scope, node.value, node.index):
            self.report(node.span)


class UncheckedIndexingChecker(Checker):
    """Checker for E1408: Unchecked indexing."""

    code = "E1408"
    name = "Unchecked indexing"
    config_key = "unchecked_indexing"
    severity = Severity.HIGH
    message = "Direct indexing with [] can panic if the index is out of bounds."
    suggestion = "Use .get() for fallible access, or validate the index before using []"

    def create_walker(self, report: Report) -> IndexingWalker:
        return IndexingWalker(report)


__all__ = ["IndexingWalker", "UncheckedIndexingChecker"]
