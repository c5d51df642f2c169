"""Condition fact extraction.
``extract`` decomposes a branch condition into the guarantees that hold in
its then-branch and in its else-branch. Recognized shapes (``R`` is the
receiver of a length check):

    R.is_empty()                 else: MinLength(R, 1)
    idx < R.len(), idx <= ..     then: IndexBound(R, idx)
    R.len() > idx                then: IndexBound(R, idx)
    R.len() >= N                 then: MinLength(R, N)
    R.len() <= N                 nothing
    x == 0, x <= 0               else: NonZero(x)
    x != 0, x > 0, x >= 1        then: NonZero(x)
    A && B                       then: then(A) + then(B)
    !C                           then/else of C swapped
    x (a Python truth test)      then: NonZero(x), MinLength(x, 1)

Literal comparisons are decided by the solver (see ``oracle.py``), so the
rows above are the common cases rather than an exhaustive list. ``||`` is
never decomposed and an upper bound on a length never yields a guarantee.
Anything else yields no facts.
"""

from __future__ import annotations

from guardlint.guards.facts import (
    NO_FACTS,
    BranchFacts,
    Fact,
    Guarantee,
    IndexBound,
    MinLength,
    NonZero,
)
from guardlint.guards.normalize import length_receiver, literal_value, normalize, peel
from guardlint.guards.oracle import (
    COMPARISON_OPS,
    FLIPPED,
    implies_nonzero,
    minimum_length,
)
from guardlint.syntax.nodes import Binary, Expr, MethodCall, Paren, Truthy, Unary


def _fact(guarantee: Guarantee, node: Expr) -> Fact:
    return Fact(guarantee=guarantee, origin=node.span)


def _literal_comparison(
    node: Binary, op: str, subject: Expr, bound: int | float
) -> BranchFacts:
    """Facts for ``subject OP bound`` with ``bound`` a numeric literal."""
    then_facts: list[Fact] = []
    else_facts: list[Fact] = []
    key = normalize(peel(subject))
    if implies_nonzero(op, bound):
        then_facts.append(_fact(NonZero(key), node))
    if implies_nonzero(op, bound, negate=True):
        else_facts.append(_fact(NonZero(key), node))
    receiver = length_receiver(subject)
    if receiver is not None and isinstance(bound, int):
        least = minimum_length(op, bound)
        if least >= 1:
            then_facts.append(_fact(MinLength(normalize(receiver), least), node))
    return BranchFacts(tuple(then_facts), tuple(else_facts))


def _index_association(node: Binary, op: str, left: Expr, right: Expr) -> Fact | None:
    """``idx < R.len()`` style checks, with the length on either side.
    With the length on the left only ``R.len() > idx`` counts:
    ``R.len() >= idx`` still admits ``idx == R.len()``.
    """
    receiver = length_receiver(right)
    if receiver is not None and op in ("<", "<="):
        index = left
    else:
        receiver = length_receiver(left)
        if receiver is None or op != ">":
            return None
        index = right
    return _fact(IndexBound(normalize(receiver), normalize(index)), node)


def _comparison(node: Binary) -> BranchFacts:
    op, left, right = node.op, node.left, node.right
    left_value, right_value = literal_value(left), literal_value(right)
    if left_value is not None and right_value is not None:
        return NO_FACTS
    if left_value is not None:
        op, left, right, right_value = FLIPPED[op], right, left, left_value
    facts = NO_FACTS
    if right_value is not None:
        facts = _literal_comparison(node, op, left, right_value)
    else:
        association = _index_association(node, op, left, right)
        if association is not None:
            facts = BranchFacts(then_facts=(association,))
    return facts


def _truthiness(node: Truthy) -> BranchFacts:
    """``if x:`` holds for a non-zero number or a non-empty sequence."""
    subject = node.operand
    receiver = length_receiver(subject)
    then_facts = (
        _fact(NonZero(normalize(peel(subject))), node),
        _fact(MinLength(normalize(receiver if receiver is not None else subject), 1), node),
    )
    return BranchFacts(then_facts=then_facts)


def extract(condition: Expr) -> BranchFacts:
    """Split the guarantees of ``condition`` by the branch they hold in."""
    if isinstance(condition, Paren):
        return extract(condition.inner)
    if isinstance(condition, Unary):
        if condition.op == "!":
            return extract(condition.operand).negated()
        return NO_FACTS
    if isinstance(condition, MethodCall):
        if condition.method == "is_empty" and not condition.args:
            fact = _fact(MinLength(normalize(condition.receiver), 1), condition)
            return BranchFacts(else_facts=(fact,))
        return NO_FACTS
    if isinstance(condition, Truthy):
        return _truthiness(condition)
    if isinstance(condition, Binary):
        if condition.op == "&&":
            left, right = extract(condition.left), extract(condition.right)
            return BranchFacts(then_facts=left.then_facts + right.then_facts)
        if condition.op in COMPARISON_OPS:
            return _comparison(condition)
        return NO_FACTS
    return NO_FACTS


__all__ = ["extract"]
