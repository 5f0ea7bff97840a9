"""Tests for CLI configuration loading."""

from pathlib import Path

import pytest
from pytest import MonkeyPatch

from agpversion import MINIMUM_SUPPORTED_VERSION, SimpleAGPVersion
from agpversion.cli.config import (
    AGPVersionConfig,
    ConfigError,
    find_config_file,
    load_config,
)


def test_defaults_without_config(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    """Test defaults apply when no config file exists."""
    monkeypatch.chdir(tmp_path)
    config = load_config()
    assert config.minimum_version == MINIMUM_SUPPORTED_VERSION
    assert config.agp_version is None


def test_load_from_pyproject(tmp_path: Path) -> None:
    """Test reading the [tool.agpversion] table."""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text("""
[project]
name = "app"

[tool.agpversion]
minimum_version = "4.2"
agp_version = "7.0.0-alpha01"
""")
    config = load_config(pyproject)
    assert config.minimum_version == SimpleAGPVersion(4, 2)
    assert config.agp_version == SimpleAGPVersion(7, 0)


def test_pyproject_without_table(tmp_path: Path) -> None:
    """Test a pyproject.toml without the table yields defaults."""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "app"\n')
    assert load_config(pyproject) == AGPVersionConfig()


def test_standalone_file_wins(tmp_path: Path) -> None:
    """Test agpversion.toml is preferred over pyproject.toml."""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[tool.agpversion]\nagp_version = "4.2"\n')
    (tmp_path / "agpversion.toml").write_text('[agpversion]\nagp_version = "8.1"\n')

    found = find_config_file(tmp_path)
    assert found == tmp_path / "agpversion.toml"
    assert load_config(found).agp_version == SimpleAGPVersion(8, 1)


def test_find_config_file_uses_cwd(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    """Test the current directory is searched by default."""
    (tmp_path / "pyproject.toml").write_text("")
    monkeypatch.chdir(tmp_path)
    assert find_config_file() == tmp_path / "pyproject.toml"


def test_find_config_file_none(tmp_path: Path) -> None:
    """Test None is returned when nothing is found."""
    assert find_config_file(tmp_path) is None


def test_missing_explicit_file(tmp_path: Path) -> None:
    """Test an explicit path must exist."""
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "missing.toml")


def test_invalid_toml(tmp_path: Path) -> None:
    """Test malformed TOML is reported."""
    path = tmp_path / "agpversion.toml"
    path.write_text("[agpversion\n")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(path)


def test_pyproject_tool_not_a_table(tmp_path: Path) -> None:
    """Test a non-table [tool] entry is reported."""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text("tool = 1\n")
    with pytest.raises(ConfigError, match="must be a table"):
        load_config(pyproject)


def test_agpversion_not_a_table(tmp_path: Path) -> None:
    """Test a non-table agpversion entry is reported."""
    path = tmp_path / "agpversion.toml"
    path.write_text('agpversion = "7.0"\n')
    with pytest.raises(ConfigError, match="must be a table"):
        load_config(path)


@pytest.mark.parametrize(
    "body",
    [
        'agp_version = "7"',
        'minimum_version = "x.y"',
        "minimum_version = 7",
        'unknown = "1.0"',
    ],
)
def test_invalid_values(tmp_path: Path, body: str) -> None:
    """Test invalid settings raise ConfigError."""
    path = tmp_path / "agpversion.toml"
    path.write_text(f"[agpversion]\n{body}\n")
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(path)


def test_config_accepts_instances() -> None:
    """Test the model accepts SimpleAGPVersion values directly."""
    config = AGPVersionConfig(agp_version=SimpleAGPVersion(8, 2))
    assert config.agp_version == SimpleAGPVersion(8, 2)
