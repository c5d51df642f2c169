"""Site queries: is this division or indexing operation protected?
Both queries fail closed. Anything the active facts do not cover is
reported.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from guardlint.guards.normalize import (
    is_constant_shape,
    is_nonzero_literal,
    normalize,
    peel,
    range_start,
)
from guardlint.guards.scope import GuardScope
from guardlint.syntax.nodes import Expr, Range


def is_length_derived(scope: GuardScope, key: str, subjects: Iterable[str]) -> bool:
    """Whether ``key`` mentions a length-checked subject or one of its aliases.
    Subjects are found by a plain substring test: with ``MinLength(s, 3)``
    active, ``s.len() - 1`` counts as a length-derived offset. Aliases must
    appear as a whole identifier, so after ``let n = s.len()`` the offset
    ``n - 3`` counts but ``count`` does not.
    """
    for subject in subjects:
        if subject in key:
            return True
        if any(_mentions(key, alias) for alias in scope.aliases_of(subject)):
            return True
    return False


def _mentions(key: str, ident: str) -> bool:
    return re.search(rf"(?<![A-Za-z0-9_]){re.escape(ident)}(?![A-Za-z0-9_])", key) is not None


def is_division_guarded(scope: GuardScope, divisor: Expr) -> bool:
    if is_nonzero_literal(divisor):
        return True
    key = normalize(divisor)
    if scope.has_nonzero(normalize(peel(divisor))) or scope.has_nonzero(key):
        return True
    return is_length_derived(scope, key, scope.length_subjects())


def is_index_guarded(scope: GuardScope, receiver: Expr, index: Expr) -> bool:
    subject = normalize(receiver)
    if isinstance(index, Range):
        least = scope.min_length(subject)
        return least is not None and least > range_start(index)
    if is_constant_shape(index):
        return True
    key = normalize(index)
    if scope.has_index_bound(subject, key):
        return True
    if subject not in scope.length_subjects():
        return False
    return is_length_derived(scope, key, [subject])


__all__ = ["is_length_derived", "is_division_guarded", "is_index_guarded"]
