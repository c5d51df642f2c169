"""The guard scope: a stack of facts active at the current traversal point.
Facts are pushed when the walker enters a branch (or a clause of an ``&&``
chain) and popped when it leaves, so the scope always holds exactly the
facts of the enclosing checks. ``active`` restores the previous depth on
every exit path, including exceptions raised inside the visited subtree.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager

from guardlint.guards.facts import (
    Fact,
    Guarantee,
    IndexBound,
    LengthAlias,
    MinLength,
    NonZero,
)


class GuardScope:
    """LIFO stack of active facts, owned by a single traversal."""

    def __init__(self) -> None:
        self._facts: list[Fact] = []

    def __len__(self) -> int:
        return len(self._facts)

    def __iter__(self) -> Iterator[Fact]:
        return iter(self._facts)

    def __repr__(self) -> str:
        return f"GuardScope({[fact.describe() for fact in self._facts]})"

    def push(self, facts: Iterable[Fact]) -> int:
        """Push ``facts`` and return the depth to restore with ``pop_to``."""
        saved = len(self._facts)
        self._facts.extend(facts)
        return saved

    def pop_to(self, saved: int) -> None:
        del self._facts[saved:]

    @contextmanager
    def active(self, facts: Iterable[Fact]):
        """Context manager that keeps ``facts`` pushed for the ``with`` body."""
        saved = self.push(facts)
        try:
            yield self
        finally:
            self.pop_to(saved)

    @contextmanager
    def frame(self):
        """Restore the current depth on exit; for block-scoped facts."""
        saved = len(self._facts)
        try:
            yield self
        finally:
            self.pop_to(saved)

    def query(self, predicate: Callable[[Guarantee], bool]) -> bool:
        return any(predicate(fact.guarantee) for fact in self._facts)

    def has_nonzero(self, key: str) -> bool:
        return self.query(lambda g: isinstance(g, NonZero) and g.subject == key)

    def min_length(self, subject: str) -> int | None:
        """Largest active lower bound on ``subject.len()``, if any."""
        bounds = [
            fact.guarantee.min
            for fact in self._facts
            if isinstance(fact.guarantee, MinLength) and fact.guarantee.subject == subject
        ]
        return max(bounds) if bounds else None

    def has_index_bound(self, subject: str, index: str) -> bool:
        return self.query(
            lambda g: isinstance(g, IndexBound) and g.subject == subject and g.index == index
        )

    def length_subjects(self) -> set[str]:
        """Subjects with an active ``MinLength`` fact."""
        return {
            fact.guarantee.subject
            for fact in self._facts
            if isinstance(fact.guarantee, MinLength)
        }

    def aliases_of(self, subject: str) -> list[str]:
        """Local names currently bound to ``subject.len()``."""
        return [
            fact.guarantee.alias
            for fact in self._facts
            if isinstance(fact.guarantee, LengthAlias) and fact.guarantee.subject == subject
        ]


__all__ = ["GuardScope"]
