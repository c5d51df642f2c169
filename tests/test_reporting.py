"""Tests for diagnostic formatters."""

import json

from guardlint.checkers import Severity, Violation
from guardlint.reporting import JSONFormatter, TextFormatter, format_violations


def make(code="E1402", line=3, column=9):
    return Violation(
        code=code,
        name="Division by zero",
        severity=Severity.HIGH,
        message="Division operation without zero check. Will panic if divisor is zero.",
        file_path="src/lib.rs",
        line=line,
        column=column,
        suggestion="Use checked_div()",
    )


def test_text_format():
    output = TextFormatter().format([make(), make("E1408", 7, 5)])
    lines = output.splitlines()
    assert lines[0] == "src/lib.rs:3:9: E1402 Division operation without zero check. Will panic if divisor is zero."
    assert lines[1] == "  suggestion: Use checked_div()"
    assert lines[-1] == "Found 2 violations (E1402: 1, E1408: 1)"


def test_text_format_without_violations():
    assert format_violations([], "text") == "No violations found"


def test_json_format():
    data = json.loads(format_violations([make(), make()], "json"))
    assert data["summary"] == {"total": 2, "by_code": {"E1402": 2}}
    assert data["violations"][0]["severity"] == "high"
    assert data["violations"][0]["column"] == 9


def test_unknown_format_falls_back_to_text():
    assert format_violations([make()], "yaml").startswith("src/lib.rs:3:9:")


def test_json_formatter_indent():
    assert "\n" not in JSONFormatter(indent=None).format([])
