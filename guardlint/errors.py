"""Exceptions raised by guardlint.
The guard analysis itself never raises; these cover the driver around it:
reading and parsing source files, and loading configuration.
"""
from __future__ import annotations
from pathlib import Path
class GuardlintError(Exception):
    """Base class for all guardlint errors."""
class SourceParseError(GuardlintError):
    """Source text could not be parsed into a syntax tree."""
    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.message = message
        self.path = str(path) if path is not None else None
        self.line = line
        self.column = column
        super().__init__(self._format())
    def _format(self) -> str:
        where = self.path or "<source>"
        if self.line is not None:
            where += f":{self.line}"
            if self.column is not None:
                where += f":{self.column}"
        return f"{where}: {self.message}"
class UnsupportedLanguageError(GuardlintError):
    """No frontend exists for the requested language or file suffix."""
    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported language: {language}")
class ConfigError(GuardlintError):
    """A configuration value has the wrong type or an unknown value."""
    def __init__(self, key: str, value: object, expected: str):
        self.key = key
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid value for {key}: {value!r} (expected {expected})")
__all__ = [
    "GuardlintError",
    "SourceParseError",
    "UnsupportedLanguageError",
    "ConfigError",
]
