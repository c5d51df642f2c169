"""guardlint: guard-aware detection of unprotected division and indexing.

Usage:
    from guardlint import analyze_source, analyze_files

    violations = analyze_source(rust_code, "rust")
    reports = analyze_files(["src/lib.rs", "tools/stats.py"])
"""

from guardlint.api import FileReport, analyze_file, analyze_files, analyze_source, format_reports
from guardlint.checkers import (
    Checker,
    DivisionByZeroChecker,
    Severity,
    UncheckedIndexingChecker,
    Violation,
)
from guardlint.config import GuardlintConfig, load_config
from guardlint.errors import (
    ConfigError,
    GuardlintError,
    SourceParseError,
    UnsupportedLanguageError,
)
from guardlint.frontends import language_for_path, parse
from guardlint.reporting import format_violations

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "analyze_source",
    "analyze_file",
    "analyze_files",
    "FileReport",
    "format_reports",
    "Checker",
    "DivisionByZeroChecker",
    "UncheckedIndexingChecker",
    "Severity",
    "Violation",
    "GuardlintConfig",
    "load_config",
    "GuardlintError",
    "SourceParseError",
    "UnsupportedLanguageError",
    "ConfigError",
    "parse",
    "language_for_path",
    "format_violations",
]
