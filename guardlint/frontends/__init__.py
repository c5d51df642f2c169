"""Frontends: parse source text into the generic syntax tree."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from guardlint.errors import UnsupportedLanguageError
from guardlint.frontends.python import parse_python
from guardlint.frontends.rust import parse_rust
from guardlint.syntax.nodes import Module

SUFFIXES = {
    ".rs": "rust",
    ".py": "python",
    ".pyi": "python",
}

PARSERS: dict[str, Callable[[str, str | None], Module]] = {
    "rust": parse_rust,
    "python": parse_python,
}


def language_for_path(path: str | Path) -> str:
    """Infer the source language from a file suffix.
    Raises:
        UnsupportedLanguageError: no frontend handles the suffix
    """
    suffix = Path(path).suffix.lower()
    try:
        return SUFFIXES[suffix]
    except KeyError:
        raise UnsupportedLanguageError(suffix or str(path)) from None


def parse(source: str, language: str = "rust", path: str | Path | None = None) -> Module:
    """Parse ``source`` with the frontend for ``language``.
    ``language="auto"`` infers it from ``path``.
    """
    if language == "auto":
        if path is None:
            raise UnsupportedLanguageError("auto (no path to infer from)")
        language = language_for_path(path)
    parser = PARSERS.get(language)
    if parser is None:
        raise UnsupportedLanguageError(language)
    return parser(source, str(path) if path is not None else None)


__all__ = ["SUFFIXES", "PARSERS", "language_for_path", "parse", "parse_python", "parse_rust"]
