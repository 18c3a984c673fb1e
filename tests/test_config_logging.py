"""
Tests for Settings and Logging Configuration
"""

import json
import logging

import pytest
from pydantic import ValidationError

from field_sanitizer.core.config import Settings, settings
from field_sanitizer.core.logging import (
    LIBRARY_LOGGER_NAME,
    CustomJsonFormatter,
    get_logger,
    setup_logging,
)


class TestSettings:
    """Test suite for Settings"""

    def test_defaults(self):
        """Test: default values"""
        config = Settings()

        assert config.LOG_LEVEL == "WARNING"
        assert config.LOG_FORMAT == "json"
        assert config.MAX_NESTING_DEPTH == 64

    def test_environment_from_conftest(self):
        """Test: SANITIZER_ENVIRONMENT is read from the environment"""
        assert settings.ENVIRONMENT == "test"

    def test_env_override(self, monkeypatch):
        """Test: SANITIZER_* variables override defaults"""
        monkeypatch.setenv("SANITIZER_MAX_NESTING_DEPTH", "5")
        monkeypatch.setenv("SANITIZER_LOG_LEVEL", "debug")

        config = Settings()

        assert config.MAX_NESTING_DEPTH == 5
        assert config.LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="loud")

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            Settings(LOG_FORMAT="xml")

    def test_invalid_max_depth(self):
        with pytest.raises(ValidationError):
            Settings(MAX_NESTING_DEPTH=0)


class TestLogging:
    """Test suite for logging setup"""

    def test_json_setup(self, restore_library_logger):
        """Test: setup_logging installs a JSON handler on the library logger"""
        logger = setup_logging("debug", "json")

        assert logger.name == LIBRARY_LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, CustomJsonFormatter)

    def test_text_setup(self, restore_library_logger):
        """Test: text format uses a plain formatter"""
        logger = setup_logging("INFO", "text")

        assert not isinstance(logger.handlers[0].formatter, CustomJsonFormatter)

    def test_json_record_fields(self):
        """Test: JSON records carry level, logger and source fields"""
        formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s', timestamp=True)
        record = logging.LogRecord(
            "field_sanitizer.test", logging.INFO, __file__, 10, "hello", None, None
        )

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "field_sanitizer.test"
        assert payload["line"] == 10

    def test_get_logger(self):
        assert get_logger("field_sanitizer.x").name == "field_sanitizer.x"
