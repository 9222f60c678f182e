"""
Configuration for prattcalc.

Configuration is loaded from the [prattcalc] table of prattcalc.toml.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from prattcalc.core.errors import ConfigError

DEFAULT_CONFIG_FILE = "prattcalc.toml"
LOG_LEVEL_ENV = "PRATTCALC_LOG_LEVEL"

logger = logging.getLogger(__name__)


class CalcConfig(BaseModel):
    """Settings for the read-loop and result formatting."""

    prompt: str = "evaluator -> "
    exit_command: str = "exit"
    number_format: str = Field(default=".15g", description="format() spec for results")
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("number_format")
    @classmethod
    def _check_number_format(cls, value: str) -> str:
        try:
            format(1.5, value)
        except ValueError as e:
            raise ValueError(f"invalid number format {value!r}: {e}") from e
        return value

    def format_value(self, value: float) -> str:
        """Render a result with the configured format spec."""
        return format(value, self.number_format)


def load_config(path: Path | None = None, log_level: str | None = None) -> CalcConfig:
    """
    Load configuration from a TOML file.

    Args:
        path: Explicit config file. If None, prattcalc.toml in the current
            directory is used when present.
        log_level: Overrides both the file and $PRATTCALC_LOG_LEVEL.

    Returns:
        CalcConfig with values from file, environment, or defaults

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_FILE
        data = _read_toml(candidate) if candidate.exists() else {}
    else:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        data = _read_toml(path)

    raw = data.get("prattcalc", {})
    if not isinstance(raw, dict):
        raise ConfigError("[prattcalc] must be a table")
    section: dict[str, Any] = dict(raw)

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if log_level:
        section["log_level"] = log_level
    elif env_level:
        section["log_level"] = env_level

    try:
        return CalcConfig(**section)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e
    logger.debug("Loaded config from %s", path)
    return data
