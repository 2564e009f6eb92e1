# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the loxscan configuration file."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".loxscan.yaml"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


class ScannerConfig(BaseModel):
    """Settings for the loxscan command-line tool.

    Attributes:
        fail_on_error: Exit with a non-zero status when a scan reports errors.
        show_lines: Include the line number column in token listings.
        color: Colourize terminal output.
        prompt: Prompt string shown by the interactive loop.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    fail_on_error: bool = Field(alias="fail-on-error", default=True)
    show_lines: bool = Field(alias="show-lines", default=True)
    color: bool = True
    prompt: str = "> "


def find_config(directory: Path) -> Path | None:
    """Return the path of the configuration file in directory, if there is one."""
    candidate = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    return None


def load_config(path: Path) -> ScannerConfig:
    """Load and validate a configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the `.loxscan.yaml` file.

    Returns:
        A validated ScannerConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return ScannerConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc
