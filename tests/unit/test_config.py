"""Unit tests for configuration management."""

import json
import logging
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import pytest

from metro.config import (
    LoggingConfig,
    LogLevel,
    MetroConfig,
    OutputConfig,
    find_config_file,
    load_config,
)


class TestOutputConfig:
    """Test OutputConfig model."""

    def test_output_config_defaults(self):
        """Test default output settings."""
        config = OutputConfig()
        assert config.encoding == "utf-8"
        assert config.trailing_newline is True

    def test_output_config_alias(self):
        """Test camelCase alias and field name both populate."""
        assert OutputConfig(trailingNewline=False).trailing_newline is False
        assert OutputConfig(trailing_newline=False).trailing_newline is False

    def test_output_config_unknown_encoding(self):
        """Test that unknown encodings are rejected."""
        with pytest.raises(ValueError, match="unknown encoding"):
            OutputConfig(encoding="no-such-codec")


class TestMetroConfig:
    """Test complete MetroConfig model."""

    def test_default_config(self):
        """Test zero-argument config."""
        config = MetroConfig()
        assert config.output.encoding == "utf-8"
        assert config.logging.level == LogLevel.WARN

    def test_config_from_dict(self):
        """Test config creation from dictionary."""
        config_data = {
            "output": {
                "encoding": "latin-1",
                "trailingNewline": False
            },
            "logging": {
                "level": "debug"
            }
        }

        config = MetroConfig(**config_data)
        assert config.output.encoding == "latin-1"
        assert config.output.trailing_newline is False
        assert config.logging.level == LogLevel.DEBUG

    def test_config_validation_error(self):
        """Test config validation error handling."""
        with pytest.raises(ValueError):
            MetroConfig(logging={"level": "verbose"})

    def test_config_extra_fields_forbidden(self):
        """Test that extra fields are rejected."""
        with pytest.raises(ValueError):
            MetroConfig(invalid_field="should-fail")

    @pytest.mark.parametrize("level,expected", [
        (LogLevel.ERROR, logging.ERROR),
        (LogLevel.WARN, logging.WARNING),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.DEBUG, logging.DEBUG),
    ])
    def test_log_level_mapping(self, level, expected):
        """Test mapping to logging module levels."""
        assert LoggingConfig(level=level).level.to_logging() == expected


class TestConfigFileOperations:
    """Test configuration file loading and discovery."""

    def test_load_config_with_file(self):
        """Test loading config from existing file."""
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".metro.json"
            with open(config_file, "w") as f:
                json.dump({"logging": {"level": "info"}}, f)

            config = load_config(config_file)
            assert config.logging.level == LogLevel.INFO

    def test_load_config_file_not_found(self):
        """Test an explicit config path that does not exist."""
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / "nonexistent.json"
            with pytest.raises(ValueError, match="Config file not found"):
                load_config(config_file)

    def test_load_config_discovered_file(self):
        """Test the nearest .metro.json is used when no path is given."""
        with TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir).resolve()
            (temp_path / ".metro.json").write_text('{"logging": {"level": "debug"}}', encoding="utf-8")
            sub_dir = temp_path / "nested"
            sub_dir.mkdir()

            with patch("pathlib.Path.cwd", return_value=sub_dir):
                config = load_config()
            assert config.logging.level == LogLevel.DEBUG

    def test_load_config_invalid_json(self):
        """Test loading config with invalid JSON."""
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".metro.json"
            with open(config_file, "w") as f:
                f.write("{invalid json")

            with pytest.raises(ValueError, match="Invalid JSON"):
                load_config(config_file)

    def test_load_config_invalid_structure(self):
        """Test loading config with invalid structure."""
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".metro.json"
            with open(config_file, "w") as f:
                json.dump({"invalid": "structure"}, f)

            with pytest.raises(ValueError, match="Failed to load config"):
                load_config(config_file)

    def test_find_config_file_current_dir(self):
        """Test finding config file in current directory."""
        with TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir).resolve()
            config_file = temp_path / ".metro.json"
            config_file.touch()

            assert find_config_file(temp_path) == config_file

    def test_find_config_file_parent_dir(self):
        """Test finding config file in parent directory."""
        with TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir).resolve()
            config_file = temp_path / ".metro.json"
            config_file.touch()

            sub_dir = temp_path / "a" / "b"
            sub_dir.mkdir(parents=True)

            assert find_config_file(sub_dir) == config_file

    def test_zero_config_operation(self):
        """Test zero-config operation with defaults."""
        with patch("metro.config.find_config_file", return_value=None):
            config = load_config()
            assert config.output.trailing_newline is True
            assert config.logging.level == LogLevel.WARN
