"""End-to-end tests on Rust source through the tree-sitter frontend."""

import textwrap

import pytest

from guardlint import analyze_source
from guardlint.errors import SourceParseError
from guardlint.frontends import parse
from guardlint.syntax import Cast, Function, If, Index, Literal, MethodCall, Range, walk


def rust(source):
    return textwrap.dedent(source).strip() + "\n"


def found(source):
    return [(v.code, v.line) for v in analyze_source(rust(source), "rust")]


def nodes_of(tree, kind):
    return [node for node in walk(tree) if isinstance(node, kind)]


class TestLowering:
    def test_function_and_if(self):
        tree = parse(rust("""
            fn divide(x: i32, y: i32) -> i32 {
                if y == 0 { 0 } else { x / y }
            }
        """), "rust")
        (function,) = nodes_of(tree, Function)
        assert function.name == "divide"
        (conditional,) = nodes_of(tree, If)
        assert conditional.orelse is not None

    def test_method_calls_indexing_and_ranges(self):
        tree = parse(rust("""
            fn f(v: &[i32], s: &str, i: usize) -> usize {
                let a = v[i];
                let b = &s[1..=3];
                v.len()
            }
        """), "rust")
        indexes = nodes_of(tree, Index)
        assert len(indexes) == 2
        (inclusive,) = nodes_of(tree, Range)
        assert inclusive.inclusive
        assert any(call.method == "len" for call in nodes_of(tree, MethodCall))

    def test_integer_literal_forms(self):
        tree = parse(rust("""
            fn f() {
                let a = 1_000u32;
                let b = 0xFF;
                let c = 2.5f64;
            }
        """), "rust")
        values = [lit.value for lit in nodes_of(tree, Literal)]
        assert values == [1000, 255, 2.5]

    def test_casts(self):
        tree = parse("fn f(n: usize) -> f64 { n as f64 }\n", "rust")
        (cast,) = nodes_of(tree, Cast)
        assert cast.type_name == "f64"

    def test_syntax_error(self):
        with pytest.raises(SourceParseError) as excinfo:
            parse("fn broken( {\n", "rust", path="broken.rs")
        assert excinfo.value.path == "broken.rs"
        assert excinfo.value.line is not None
        assert str(excinfo.value).startswith("broken.rs:")


class TestGuards:
    def test_branch_polarity(self):
        assert found("""
            fn divide(x: i32, y: i32) -> i32 {
                if y == 0 { 0 } else { x / y }
            }
        """) == []
        assert found("""
            fn divide(x: i32, y: i32) -> i32 {
                if y == 0 { x / y } else { 0 }
            }
        """) == [("E1402", 2)]

    def test_is_empty_polarity(self):
        assert found("""
            fn mean(v: &[i32], total: i32) -> f64 {
                if v.is_empty() { 0.0 } else { total as f64 / v.len() as f64 }
            }
        """) == []
        assert found("""
            fn mean(v: &[i32], total: i32) -> f64 {
                if v.is_empty() { total as f64 / v.len() as f64 } else { 0.0 }
            }
        """) == [("E1402", 2)]

    def test_min_length_offset(self):
        assert found("""
            fn third_last(s: &[u8]) -> u8 {
                if s.len() >= 3 {
                    let n = s.len();
                    s[n - 3]
                } else {
                    0
                }
            }
        """) == []

    def test_insufficient_guard(self):
        assert found("""
            fn rest(s: &str) -> &str {
                if s.len() <= 3 { &s[1..] } else { s }
            }
        """) == [("E1408", 2)]

    def test_compound_and(self):
        assert found("""
            fn is_word(s: &str) -> bool {
                if s.len() >= 2 && s[1..].chars().all(|c| c.is_alphabetic()) { true } else { false }
            }
        """) == []

    def test_index_checked_against_length(self):
        assert found("""
            fn get(v: &[i32], i: usize) -> i32 {
                if i < v.len() { v[i] } else { -1 }
            }
        """) == []

    def test_length_at_least_index_is_not_enough(self):
        assert found("""
            fn get(v: &[i32], i: usize) -> i32 {
                if v.len() >= i { v[i] } else { 0 }
            }
        """) == [("E1408", 2)]

    def test_index_checked_later_in_the_same_condition(self):
        assert found("""
            fn positive_at(v: &[i32], i: usize) -> bool {
                if v[i] > 0 && i < v.len() { true } else { false }
            }
        """) == []

    def test_length_alias_does_not_cover_unrelated_divisor(self):
        assert found("""
            fn f(v: &[i32], x: i32, count: i32) -> i32 {
                let n = v.len();
                if !v.is_empty() { x / count } else { 0 }
            }
        """) == [("E1402", 3)]

    def test_nonzero_literal_and_constant_index(self):
        assert found("""
            const WIDTH: usize = 4;
            fn f(v: &[i32]) -> i32 {
                v[0] / 2 + v[WIDTH] % 3
            }
        """) == []

    def test_unguarded_sites_in_methods_and_closures(self):
        assert found("""
            struct Stats { total: i32 }
            impl Stats {
                fn scaled(&self, xs: &[i32], k: i32) -> Vec<i32> {
                    xs.iter().map(|x| x / k).collect()
                }
                fn first(&self, xs: &[i32], i: usize) -> i32 {
                    xs[i]
                }
            }
        """) == [("E1402", 4), ("E1408", 7)]

    def test_guard_does_not_leak_past_branch(self):
        assert found("""
            fn f(x: i32, y: i32) -> i32 {
                if y != 0 {
                    return x / y;
                }
                x / y
            }
        """) == [("E1402", 5)]
