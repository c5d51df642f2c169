"""Tests for TOML configuration loading."""

import tomllib

import pytest

from guardlint.config import GuardlintConfig, find_config_file, generate_default_config, load_config
from guardlint.errors import ConfigError


def test_defaults():
    config = GuardlintConfig()
    assert config.checkers.division_by_zero and config.checkers.unchecked_indexing
    assert config.analysis.language == "auto"
    assert config.output.format == "text"


def test_load_standalone_file(tmp_path):
    path = tmp_path / "guardlint.toml"
    path.write_text(
        "[checkers]\nunchecked_indexing = false\n\n[analysis]\nlanguage = \"rust\"\nmax_workers = 2\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.config_file == path
    assert config.checkers.unchecked_indexing is False
    assert config.analysis.language == "rust"
    assert config.analysis.max_workers == 2


def test_load_from_pyproject_tool_table(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        "[project]\nname = \"demo\"\n\n[tool.guardlint.output]\nformat = \"json\"\n",
        encoding="utf-8",
    )
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)
    config = load_config(start_dir=nested)
    assert config.output.format == "json"


def test_pyproject_without_tool_table_is_skipped(tmp_path):
    (tmp_path / "guardlint.toml").write_text("[output]\nverbose = true\n", encoding="utf-8")
    inner = tmp_path / "inner"
    inner.mkdir()
    (inner / "pyproject.toml").write_text("[project]\nname = \"x\"\n", encoding="utf-8")
    assert find_config_file(inner) == (tmp_path / "guardlint.toml").resolve()


@pytest.mark.parametrize(
    "content",
    [
        "[analysis]\nlanguage = \"go\"\n",
        "[analysis]\nmax_workers = 0\n",
        "[analysis]\nmax_workers = true\n",
        "[checkers]\ndivision_by_zero = \"yes\"\n",
        "[output]\nformat = \"xml\"\n",
    ],
)
def test_invalid_values_raise(tmp_path, content):
    path = tmp_path / "guardlint.toml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_malformed_file_falls_back_to_defaults(tmp_path, logger):
    path = tmp_path / "guardlint.toml"
    path.write_text("[checkers\n", encoding="utf-8")
    config = load_config(path)
    assert config == GuardlintConfig()
    assert logger.get_entries(category="config")


def test_to_toml_round_trips(tmp_path):
    config = GuardlintConfig()
    config.checkers.division_by_zero = False
    config.analysis.max_workers = 8
    path = tmp_path / "guardlint.toml"
    path.write_text(config.to_toml(), encoding="utf-8")
    loaded = load_config(path)
    assert loaded.to_dict() == config.to_dict()


def test_default_config_is_valid_toml():
    data = tomllib.loads(generate_default_config())
    assert data["tool"]["guardlint"]["checkers"]["division_by_zero"] is True
