"""Reporting module for guardlint."""

from guardlint.reporting.formatters import (
    FORMATTERS,
    Formatter,
    JSONFormatter,
    TextFormatter,
    format_violations,
)

__all__ = [
    "FORMATTERS",
    "Formatter",
    "TextFormatter",
    "JSONFormatter",
    "format_violations",
]
