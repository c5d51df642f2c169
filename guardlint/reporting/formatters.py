"""Output formatters for guardlint diagnostics."""
from __future__ import annotations
import json
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Sequence
from guardlint.checkers.base import Violation
from guardlint.logging import Colors
class Formatter(ABC):
    """Base class for output formatters."""
    name: str = "base"
    extension: str = ".txt"
    @abstractmethod
    def format(self, violations: Sequence[Violation]) -> str:
        """Format a list of violations."""
    def save(self, violations: Sequence[Violation], filepath: str) -> None:
        """Save formatted violations to file."""
        content = self.format(violations)
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(content)
class TextFormatter(Formatter):
    """One ``path:line:col: CODE message`` line per violation, plus its suggestion."""
    name = "text"
    extension = ".txt"
    def __init__(self, color: bool = False, verbose: bool = False):
        self.color = color
        self.verbose = verbose
    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{Colors.RESET}" if self.color else text
    def format(self, violations: Sequence[Violation]) -> str:
        lines = []
        for violation in violations:
            location = f"{violation.file_path}:{violation.line}:{violation.column}:"
            code = self._paint(violation.code, Colors.RED + Colors.BOLD)
            lines.append(f"{location} {code} {violation.message}")
            if violation.suggestion:
                lines.append(f"  suggestion: {violation.suggestion}")
            if self.verbose:
                lines.append(f"  rule: {violation.name} ({violation.severity.value})")
        if violations:
            counts = Counter(v.code for v in violations)
            breakdown = ", ".join(f"{code}: {n}" for code, n in sorted(counts.items()))
            noun = "violation" if len(violations) == 1 else "violations"
            lines.append(self._paint(f"Found {len(violations)} {noun} ({breakdown})", Colors.YELLOW))
        else:
            lines.append(self._paint("No violations found", Colors.GREEN))
        return "\n".join(lines)
class JSONFormatter(Formatter):
    """JSON formatter for machine-readable output."""
    name = "json"
    extension = ".json"
    def __init__(self, indent: int = 2):
        self.indent = indent
    def format(self, violations: Sequence[Violation]) -> str:
        counts = Counter(v.code for v in violations)
        data = {
            "meta": {"tool": "guardlint"},
            "violations": [v.to_dict() for v in violations],
            "summary": {
                "total": len(violations),
                "by_code": dict(sorted(counts.items())),
            },
        }
        return json.dumps(data, indent=self.indent)
FORMATTERS: dict[str, type[Formatter]] = {
    "text": TextFormatter,
    "json": JSONFormatter,
}
def format_violations(
    violations: Sequence[Violation],
    format_type: str = "text",
    **kwargs,
) -> str:
    """
    Format violations for output.
    Args:
        violations: The violations to format
        format_type: One of "text", "json"
        **kwargs: Additional formatter options
    Returns:
        Formatted string
    """
    formatter_class = FORMATTERS.get(format_type.lower(), TextFormatter)
    formatter = formatter_class(**kwargs)
    return formatter.format(violations)
__all__ = ["Formatter", "TextFormatter", "JSONFormatter", "FORMATTERS", "format_violations"]
