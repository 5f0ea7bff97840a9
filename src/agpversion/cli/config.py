"""Configuration loading for the agpversion CLI."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..compatibility import MINIMUM_SUPPORTED_VERSION
from ..model_version import SimpleAGPVersion

logger = logging.getLogger(__name__)

CONFIG_FILE = "agpversion.toml"
PYPROJECT_FILE = "pyproject.toml"


class ConfigError(Exception):
    """Raised when configuration cannot be found or is invalid."""


class AGPVersionConfig(BaseModel):
    """Settings read from the [agpversion] configuration table.

    Attributes:
        minimum_version: Lowest AGP version the plugin supports.
        agp_version: AGP version in use by the project, if pinned.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    minimum_version: SimpleAGPVersion = MINIMUM_SUPPORTED_VERSION
    agp_version: SimpleAGPVersion | None = None

    @field_validator("minimum_version", "agp_version", mode="before")
    @classmethod
    def _parse_version(cls, value: Any) -> Any:
        if isinstance(value, str):
            return SimpleAGPVersion.parse(value)
        return value


def find_config_file(start: Path | None = None) -> Path | None:
    """Find the configuration file in a directory.

    A standalone agpversion.toml takes precedence over pyproject.toml.

    Args:
        start: Directory to look in. Defaults to the current directory.

    Returns:
        Path to the config file, or None if neither file exists.
    """
    directory = start or Path.cwd()
    for name in (CONFIG_FILE, PYPROJECT_FILE):
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def _read_table(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    if path.name == PYPROJECT_FILE:
        tool = data.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError(f"[tool] in {path} must be a table")
        table = tool.get("agpversion", {})
    else:
        table = data.get("agpversion", {})

    if not isinstance(table, dict):
        raise ConfigError(f"[agpversion] in {path} must be a table")
    return table


def load_config(path: Path | None = None) -> AGPVersionConfig:
    """Load configuration from a file.

    Args:
        path: Explicit config file. When None, the current directory is
            searched with find_config_file.

    Returns:
        The validated configuration. Defaults apply when no file or table is
        present.

    Raises:
        ConfigError: If an explicit path does not exist or the configuration
            is invalid.
    """
    if path is not None and not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    config_path = path or find_config_file()
    if config_path is None:
        logger.debug("No configuration file found, using defaults")
        return AGPVersionConfig()

    logger.debug("Loading configuration from %s", config_path)
    table = _read_table(config_path)
    try:
        return AGPVersionConfig.model_validate(table)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
