"""Tests for the E1402 and E1408 checkers on hand-built trees."""

from guardlint.checkers import (
    DivisionByZeroChecker,
    Severity,
    UncheckedIndexingChecker,
    default_registry,
)
from guardlint.config import CheckerConfig
from guardlint.syntax import Binary, Block, Cast, Let, Name, Span

from helpers import cmp, div, if_, index, is_empty, length, name, num, slice_from


def codes(violations):
    return [v.code for v in violations]


class TestDivisionByZeroChecker:
    def test_unguarded_division_is_reported_at_divisor(self):
        tree = Binary("/", name("x"), Name("y", span=Span(3, 9)), span=Span(3, 5))
        (violation,) = DivisionByZeroChecker().check(tree, "lib.rs")
        assert violation.code == "E1402"
        assert violation.severity is Severity.HIGH
        assert (violation.file_path, violation.line, violation.column) == ("lib.rs", 3, 9)
        assert "checked_div()" in violation.suggestion

    def test_remainder_and_floor_division(self):
        tree = Block((Binary("%", name("a"), name("b")), Binary("//", name("a"), name("b"))))
        assert codes(DivisionByZeroChecker().check(tree)) == ["E1402", "E1402"]

    def test_literal_divisors(self):
        tree = Block((div(name("x"), num(2)), div(name("x"), num(0))))
        assert len(DivisionByZeroChecker().check(tree)) == 1

    def test_branch_polarity(self):
        guarded = if_(cmp("==", name("y"), num(0)), [num(0)], [div(name("x"), name("y"))])
        unguarded = if_(cmp("==", name("y"), num(0)), [div(name("x"), name("y"))], [num(0)])
        assert DivisionByZeroChecker().check(guarded) == []
        assert len(DivisionByZeroChecker().check(unguarded)) == 1

    def test_is_empty_polarity(self):
        mean = div(Cast(name("total"), "f64"), Cast(length("v"), "f64"))
        guarded = if_(is_empty("v"), [num(0.0)], [mean])
        unguarded = if_(is_empty("v"), [mean], [num(0.0)])
        assert DivisionByZeroChecker().check(guarded) == []
        assert len(DivisionByZeroChecker().check(unguarded)) == 1

    def test_sink_receives_each_violation(self):
        received = []
        tree = Block((div(name("a"), name("b")), div(name("c"), name("d"))))
        violations = DivisionByZeroChecker().check(tree, sink=received.append)
        assert received == violations


class TestUncheckedIndexingChecker:
    def test_unguarded_index(self):
        (violation,) = UncheckedIndexingChecker().check(index("v", name("i")))
        assert violation.code == "E1408"
        assert violation.message.startswith("Direct indexing with []")

    def test_constant_index_is_accepted(self):
        assert UncheckedIndexingChecker().check(index("v", num(0))) == []

    def test_min_length_offset(self):
        tree = if_(
            cmp(">=", length("s"), num(3)),
            [Let("n", length("s")), index("s", Binary("-", name("n"), num(3)))],
        )
        assert UncheckedIndexingChecker().check(tree) == []

    def test_insufficient_guard(self):
        tree = if_(cmp("<=", length("s"), num(3)), [slice_from("s", 1)])
        assert len(UncheckedIndexingChecker().check(tree)) == 1

    def test_compound_and(self):
        condition = Binary("&&", cmp(">=", length("s"), num(2)), slice_from("s", 1))
        assert UncheckedIndexingChecker().check(if_(condition, [])) == []

    def test_index_below_length(self):
        tree = if_(cmp("<", name("i"), length("v")), [index("v", name("i"))], [index("v", name("i"))])
        assert len(UncheckedIndexingChecker().check(tree)) == 1


def test_registry_respects_checker_config():
    enabled = default_registry.enabled(CheckerConfig(division_by_zero=False))
    assert [c.code for c in enabled] == ["E1408"]
    assert {c.code for c in default_registry.enabled()} == {"E1402", "E1408"}
    assert default_registry.get("E1402").name == "Division by zero"
    assert default_registry.get("E9999") is None
