"""Configuration system for guardlint.
Settings are read from TOML: a ``guardlint.toml`` / ``.guardlint.toml`` file
or the ``[tool.guardlint]`` table of ``pyproject.toml``.
"""
from __future__ import annotations
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from guardlint.errors import ConfigError
from guardlint.logging import get_logger
CONFIG_FILES = [
    "guardlint.toml",
    ".guardlint.toml",
    "pyproject.toml",
]
LANGUAGES = ("auto", "rust", "python")
OUTPUT_FORMATS = ("text", "json")
@dataclass
class CheckerConfig:
    """Which rules run."""
    division_by_zero: bool = True
    unchecked_indexing: bool = True
    def to_dict(self) -> dict[str, Any]:
        return {
            "division_by_zero": self.division_by_zero,
            "unchecked_indexing": self.unchecked_indexing,
        }
@dataclass
class AnalysisConfig:
    """How files are analysed."""
    language: str = "auto"
    max_workers: int = 4
    def to_dict(self) -> dict[str, Any]:
        return {
            "language": self.language,
            "max_workers": self.max_workers,
        }
@dataclass
class OutputConfig:
    """Configuration for output and reporting."""
    format: str = "text"
    verbose: bool = False
    def to_dict(self) -> dict[str, Any]:
        return {
            "format": self.format,
            "verbose": self.verbose,
        }
@dataclass
class GuardlintConfig:
    """Main configuration for guardlint."""
    checkers: CheckerConfig = field(default_factory=CheckerConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    config_file: Path | None = None
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "checkers": self.checkers.to_dict(),
            "analysis": self.analysis.to_dict(),
            "output": self.output.to_dict(),
        }
    def to_toml(self) -> str:
        """Generate a ``[tool.guardlint]`` TOML fragment."""
        lines = ["[tool.guardlint]"]
        for section, values in self.to_dict().items():
            lines.append("")
            lines.append(f"[tool.guardlint.{section}]")
            for key, value in values.items():
                if isinstance(value, bool):
                    lines.append(f"{key} = {str(value).lower()}")
                elif isinstance(value, str):
                    lines.append(f'{key} = "{value}"')
                else:
                    lines.append(f"{key} = {value}")
        return "\n".join(lines) + "\n"
def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a configuration file by walking up the directory tree.
    A ``pyproject.toml`` only counts when it has a ``[tool.guardlint]`` table.
    """
    if start_dir is None:
        start_dir = Path.cwd()
    current = start_dir.resolve()
    while True:
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if not config_path.is_file():
                continue
            if config_name != "pyproject.toml" or _has_tool_table(config_path):
                return config_path
        if current == current.parent:
            return None
        current = current.parent
def _has_tool_table(path: Path) -> bool:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return "guardlint" in data.get("tool", {})
def load_config(
    config_path: Path | None = None,
    start_dir: Path | None = None,
) -> GuardlintConfig:
    """Load configuration from file or use defaults.
    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching for config
    Returns:
        Loaded configuration
    Raises:
        ConfigError: a setting has the wrong type or an unknown value
    """
    config = GuardlintConfig()
    if config_path is None:
        config_path = find_config_file(start_dir)
    if config_path is None or not config_path.exists():
        return config
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        get_logger().warning(f"Failed to parse config file {config_path}: {e}", category="config")
        return config
    config.config_file = config_path
    if config_path.name == "pyproject.toml":
        section = data.get("tool", {}).get("guardlint", {})
    else:
        section = data.get("tool", {}).get("guardlint", data)
    _apply_config(config, section)
    return config
def _require(key: str, value: Any, kind: type, expected: str) -> Any:
    # bool is an int subclass; never accept it where a number is wanted.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(key, value, expected)
    return value
def _choice(key: str, value: Any, choices: tuple[str, ...]) -> str:
    if value not in choices:
        raise ConfigError(key, value, " or ".join(repr(c) for c in choices))
    return value
def _apply_config(config: GuardlintConfig, data: dict[str, Any]) -> None:
    """Apply configuration data to config object, validating every value."""
    if "checkers" in data:
        chk_data = data["checkers"]
        for key in ["division_by_zero", "unchecked_indexing"]:
            if key in chk_data:
                value = _require(f"checkers.{key}", chk_data[key], bool, "a boolean")
                setattr(config.checkers, key, value)
    if "analysis" in data:
        ana_data = data["analysis"]
        if "language" in ana_data:
            config.analysis.language = _choice("analysis.language", ana_data["language"], LANGUAGES)
        if "max_workers" in ana_data:
            workers = _require("analysis.max_workers", ana_data["max_workers"], int, "a positive integer")
            if workers < 1:
                raise ConfigError("analysis.max_workers", workers, "a positive integer")
            config.analysis.max_workers = workers
    if "output" in data:
        out_data = data["output"]
        if "format" in out_data:
            config.output.format = _choice("output.format", out_data["format"], OUTPUT_FORMATS)
        if "verbose" in out_data:
            config.output.verbose = _require("output.verbose", out_data["verbose"], bool, "a boolean")
def generate_default_config() -> str:
    """Generate default configuration file content."""
    return GuardlintConfig().to_toml()
__all__ = [
    "GuardlintConfig",
    "CheckerConfig",
    "AnalysisConfig",
    "OutputConfig",
    "load_config",
    "find_config_file",
    "generate_default_config",
]
