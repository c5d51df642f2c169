"""Guarantees derived from conditional checks.
A guarantee is a small immutable record naming the subject it protects by
its normalized key. Facts wrap guarantees with the span of the check they
were derived from, which only matters for tracing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from guardlint.syntax.nodes import Span


@dataclass(frozen=True)
class NonZero:
    """``subject`` is non-zero."""

    subject: str

    def describe(self) -> str:
        return f"{self.subject} != 0"


@dataclass(frozen=True)
class MinLength:
    """``subject.len() >= min``."""

    subject: str
    min: int

    def describe(self) -> str:
        return f"{self.subject}.len() >= {self.min}"


@dataclass(frozen=True)
class IndexBound:
    """``index`` was checked against ``subject.len()``."""

    subject: str
    index: str

    def describe(self) -> str:
        return f"{self.index} < {self.subject}.len()"


@dataclass(frozen=True)
class LengthAlias:
    """``alias`` is a local bound to ``subject.len()``."""

    alias: str
    subject: str

    def describe(self) -> str:
        return f"{self.alias} = {self.subject}.len()"


Guarantee = Union[NonZero, MinLength, IndexBound, LengthAlias]


@dataclass(frozen=True)
class Fact:
    guarantee: Guarantee
    origin: Span | None = field(default=None, compare=False)

    def describe(self) -> str:
        where = f" (from {self.origin})" if self.origin else ""
        return self.guarantee.describe() + where


@dataclass(frozen=True)
class BranchFacts:
    """Facts holding in the then-branch and in the else-branch of a condition."""

    then_facts: tuple[Fact, ...] = ()
    else_facts: tuple[Fact, ...] = ()

    def negated(self) -> BranchFacts:
        return BranchFacts(then_facts=self.else_facts, else_facts=self.then_facts)

    def __bool__(self) -> bool:
        return bool(self.then_facts or self.else_facts)


NO_FACTS = BranchFacts()


__all__ = [
    "NonZero",
    "MinLength",
    "IndexBound",
    "LengthAlias",
    "Guarantee",
    "Fact",
    "BranchFacts",
    "NO_FACTS",
]
