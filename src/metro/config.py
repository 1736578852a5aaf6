"""Configuration management for metro using Pydantic models."""

import codecs
import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CONFIG_FILE_NAME = ".metro.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"

    def to_logging(self) -> int:
        """Matching level constant from the logging module."""
        return {
            LogLevel.ERROR: logging.ERROR,
            LogLevel.WARN: logging.WARNING,
            LogLevel.INFO: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
        }[self]


class OutputConfig(BaseModel):
    """Output configuration section."""
    encoding: str = "utf-8"
    trailing_newline: bool = Field(alias="trailingNewline", default=True)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v):
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"unknown encoding: {v}")
        return v

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN


class MetroConfig(BaseModel):
    """Complete metro configuration model."""
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> MetroConfig:
    """Load configuration, falling back to defaults when none is found.

    Args:
        config_path: Explicit configuration file. If None, the nearest
                    .metro.json in the current directory or its parents is
                    used, and defaults apply when there is none.

    Returns:
        MetroConfig: Loaded and validated configuration

    Raises:
        ValueError: If an explicit file does not exist, or a file cannot be
                    read or is invalid
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            return MetroConfig()
    else:
        config_path = Path(config_path)
        if not config_path.is_file():
            raise ValueError(f"Config file not found: {config_path}")

    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Cannot read config file {config_path}: {e}")

    try:
        return MetroConfig.model_validate_json(raw)
    except ValidationError as e:
        if any(error["type"] == "json_invalid" for error in e.errors()):
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        raise ValueError(f"Failed to load config from {config_path}: {e}")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Nearest .metro.json in ``start_dir`` (default: cwd) or its parents."""
    current = Path(start_dir or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None
