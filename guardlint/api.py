"""Public API for guardlint."""
from __future__ import annotations
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from guardlint.checkers.base import Sink, Violation
from guardlint.checkers.registry import default_registry
from guardlint.config import GuardlintConfig
from guardlint.errors import GuardlintError
from guardlint.frontends import parse
from guardlint.logging import get_logger
from guardlint.reporting.formatters import format_violations
@dataclass
class FileReport:
    """Result of analysing a single file."""
    file_path: str
    violations: list[Violation] = field(default_factory=list)
    error: str | None = None
    @property
    def ok(self) -> bool:
        return self.error is None
    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file_path,
            "violations": [v.to_dict() for v in self.violations],
            "error": self.error,
        }
    def __repr__(self) -> str:
        return f"FileReport({self.file_path}, violations={len(self.violations)}, error={self.error})"
def _sort_key(violation: Violation) -> tuple[int, int, str]:
    return (violation.line, violation.column, violation.code)
def analyze_source(
    source: str,
    language: str | None = None,
    *,
    file_path: str = "<source>",
    config: GuardlintConfig | None = None,
    sink: Sink | None = None,
) -> list[Violation]:
    """
    Run every enabled checker over a piece of source text.
    Args:
        source: Rust or Python source code
        language: "rust", "python" or "auto" (infer from file_path);
                  defaults to the configured language
        file_path: Path reported in violations
        config: Configuration (defaults when omitted)
        sink: Called with each violation as it is found
    Returns:
        Violations ordered by line, column and code
    Raises:
        SourceParseError: the source does not parse
        UnsupportedLanguageError: no frontend for the language
    Example:
        >>> code = '''
        ... fn ratio(x: i32, y: i32) -> i32 {
        ...     if y == 0 { 0 } else { x / y }
        ... }
        ... '''
        >>> analyze_source(code, "rust")
        []
    """
    config = config or GuardlintConfig()
    language = language or config.analysis.language
    logger = get_logger()
    with logger.timer(f"analyze {file_path}", category="api"):
        tree = parse(source, language, path=file_path)
        violations: list[Violation] = []
        checkers = default_registry.enabled(config.checkers)
        logger.debug(f"{file_path}: running {len(checkers)} checker(s)", category="api")
        for checker in checkers:
            violations.extend(checker.check(tree, file_path, sink))
    violations.sort(key=_sort_key)
    logger.verbose(f"{file_path}: {len(violations)} violation(s)", category="api")
    return violations
def analyze_file(
    filepath: str | Path,
    config: GuardlintConfig | None = None,
    *,
    language: str | None = None,
    sink: Sink | None = None,
) -> list[Violation]:
    """
    Analyse one source file.
    The language is taken from ``language``, then from the configuration;
    "auto" infers it from the file suffix. Read and parse errors propagate.
    """
    filepath = Path(filepath)
    source = filepath.read_text(encoding="utf-8")
    return analyze_source(
        source,
        language,
        file_path=str(filepath),
        config=config,
        sink=sink,
    )
def _analyze_isolated(
    filepath: Path,
    config: GuardlintConfig,
    language: str | None,
) -> FileReport:
    report = FileReport(file_path=str(filepath))
    try:
        report.violations = analyze_file(filepath, config, language=language)
    except (GuardlintError, OSError, UnicodeDecodeError) as e:
        get_logger().warning(f"Skipping {filepath}: {e}", category="api")
        report.error = str(e)
    return report
def analyze_files(
    paths: Iterable[str | Path],
    config: GuardlintConfig | None = None,
    *,
    language: str | None = None,
) -> list[FileReport]:
    """
    Analyse explicitly listed files, in parallel when configured.
    A file that cannot be read or parsed gets a report with ``error`` set;
    the other files are still analysed. Reports follow the input order.
    """
    config = config or GuardlintConfig()
    files = [Path(p) for p in paths]
    workers = min(config.analysis.max_workers, len(files))
    logger = get_logger()
    logger.verbose(f"Analysing {len(files)} file(s) with {max(workers, 1)} worker(s)", category="api")
    if workers <= 1:
        return [_analyze_isolated(f, config, language) for f in files]
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda f: _analyze_isolated(f, config, language), files))
def format_reports(
    reports: Iterable[FileReport],
    config: GuardlintConfig | None = None,
) -> str:
    """
    Render the violations of several reports as configured.
    Args:
        reports: Reports from ``analyze_files``
        config: Supplies ``output.format`` and ``output.verbose``
    Returns:
        Formatted string
    """
    config = config or GuardlintConfig()
    violations = [v for report in reports for v in report.violations]
    options = {"verbose": config.output.verbose} if config.output.format == "text" else {}
    return format_violations(violations, config.output.format, **options)
__all__ = ["FileReport", "analyze_source", "analyze_file", "analyze_files", "format_reports"]
