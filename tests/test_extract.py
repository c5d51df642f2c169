"""Tests for condition fact extraction."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from guardlint.guards.extract import extract
from guardlint.guards.facts import NO_FACTS, Fact, IndexBound, MinLength, NonZero
from guardlint.guards.oracle import COMPARISON_OPS
from guardlint.syntax import Binary, Call, Cast, Paren, Span, Truthy

from helpers import cmp, is_empty, length, name, not_, num


def guarantees(facts):
    return [fact.guarantee for fact in facts]


def test_is_empty_guards_else_branch():
    facts = extract(is_empty("v"))
    assert facts.then_facts == ()
    assert guarantees(facts.else_facts) == [MinLength("v", 1)]


def test_negated_is_empty_guards_then_branch():
    facts = extract(not_(is_empty("v")))
    assert guarantees(facts.then_facts) == [MinLength("v", 1)]
    assert facts.else_facts == ()


@pytest.mark.parametrize("op", ["<", "<="])
def test_index_below_length(op):
    facts = extract(cmp(op, name("i"), length("v")))
    assert guarantees(facts.then_facts) == [IndexBound("v", "i")]
    assert facts.else_facts == ()


def test_length_above_index():
    facts = extract(cmp(">", length("v"), Binary("+", name("i"), num(1))))
    assert guarantees(facts.then_facts) == [IndexBound("v", "i+1")]


def test_length_at_least_variable_is_not_an_index_bound():
    facts = extract(cmp(">=", length("v"), name("i")))
    assert facts.then_facts == ()
    assert facts.else_facts == ()


def test_length_at_least_literal():
    facts = extract(cmp(">=", length("s"), num(3)))
    assert MinLength("s", 3) in guarantees(facts.then_facts)
    assert not any(isinstance(g, MinLength) for g in guarantees(facts.else_facts))


def test_length_at_most_literal_gives_no_length_guarantee():
    facts = extract(cmp("<=", length("s"), num(3)))
    assert facts.then_facts == ()
    assert not any(isinstance(g, MinLength) for g in guarantees(facts.else_facts))


@pytest.mark.parametrize(
    "op, bound",
    [("==", 0), ("<=", 0)],
)
def test_zero_checks_guard_else_branch(op, bound):
    facts = extract(cmp(op, name("x"), num(bound)))
    assert facts.then_facts == ()
    assert guarantees(facts.else_facts) == [NonZero("x")]


@pytest.mark.parametrize(
    "op, bound",
    [("!=", 0), (">", 0), (">=", 1)],
)
def test_nonzero_checks_guard_then_branch(op, bound):
    facts = extract(cmp(op, name("x"), num(bound)))
    assert guarantees(facts.then_facts) == [NonZero("x")]
    assert facts.else_facts == ()


def test_mirrored_operands_are_flipped():
    facts = extract(cmp("<", num(0), name("x")))
    assert guarantees(facts.then_facts) == [NonZero("x")]
    facts = extract(cmp("==", num(0), name("y")))
    assert guarantees(facts.else_facts) == [NonZero("y")]


def test_non_strict_zero_bound_never_guards_then_branch():
    facts = extract(cmp(">=", name("x"), num(0)))
    assert facts.then_facts == ()


def test_cast_subject_is_peeled():
    facts = extract(cmp("!=", Paren(Cast(name("n"), "usize")), num(0)))
    assert guarantees(facts.then_facts) == [NonZero("n")]


def test_conjunction_collects_then_facts():
    facts = extract(Binary("&&", cmp("!=", name("x"), num(0)), not_(is_empty("v"))))
    assert guarantees(facts.then_facts) == [NonZero("x"), MinLength("v", 1)]
    assert facts.else_facts == ()


def test_disjunction_is_never_decomposed():
    condition = Binary("||", cmp("==", name("x"), num(0)), cmp("==", name("y"), num(0)))
    assert extract(condition) == NO_FACTS


def test_parenthesized_condition():
    assert extract(Paren(cmp("!=", name("x"), num(0)))) == extract(cmp("!=", name("x"), num(0)))


def test_truth_test_guards_then_branch():
    facts = extract(Truthy(name("v")))
    assert guarantees(facts.then_facts) == [NonZero("v"), MinLength("v", 1)]
    assert facts.else_facts == ()


def test_truth_test_on_length_names_the_receiver():
    facts = extract(not_(Truthy(length("v"))))
    assert facts.then_facts == ()
    assert guarantees(facts.else_facts) == [NonZero("v.len()"), MinLength("v", 1)]


def test_negated_comparison_swaps_branches():
    facts = extract(not_(Paren(cmp("==", name("y"), num(0)))))
    assert guarantees(facts.then_facts) == [NonZero("y")]
    assert facts.else_facts == ()


@pytest.mark.parametrize(
    "condition",
    [
        Call(name("ready"), ()),
        name("flag"),
        cmp("<", num(1), num(2)),
        cmp("==", name("a"), name("b")),
        Binary("+", name("a"), num(1)),
    ],
)
def test_unrecognized_shapes_yield_nothing(condition):
    assert extract(condition) == NO_FACTS
    assert not extract(condition)


def test_fact_origin_is_the_condition_span():
    condition = Binary("!=", name("x"), num(0), span=Span(4, 8))
    (fact,) = extract(condition).then_facts
    assert fact.origin == Span(4, 8)
    assert fact == Fact(NonZero("x"))


@given(
    st.sampled_from(sorted(COMPARISON_OPS)),
    st.integers(min_value=-5, max_value=5),
    st.from_regex(r"[a-z]{1,6}", fullmatch=True),
    st.booleans(),
)
def test_extract_is_deterministic(op, bound, subject, on_length):
    left = length(subject) if on_length else name(subject)
    first = extract(cmp(op, left, num(bound)))
    second = extract(cmp(op, left, num(bound)))
    assert first == second
