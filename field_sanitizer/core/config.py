"""Library Configuration.

Centralized configuration using Pydantic Settings for type safety and validation.
Values are read from SANITIZER_* environment variables or a local .env file.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Sanitizer settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SANITIZER_",
        env_file=".env",
        extra="ignore",
    )

    # Application
    APP_NAME: str = "field-sanitizer"
    ENVIRONMENT: str = Field(default="development")

    # Logging
    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Level for the field_sanitizer logger"
    )
    LOG_FORMAT: str = Field(
        default="json",
        description="Log output format: 'json' for structured logs, 'text' for plain lines"
    )

    # Nested sanitation
    MAX_NESTING_DEPTH: int = Field(
        default=64,
        description="Maximum depth of nested objects walked by a single sanitize() call"
    )

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Normalize LOG_LEVEL and reject unknown level names."""
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown LOG_LEVEL '{v}'")
        return level

    @field_validator('LOG_FORMAT', mode='before')
    @classmethod
    def validate_log_format(cls, v):
        """Only 'json' and 'text' formats are supported."""
        log_format = str(v).lower()
        if log_format not in ('json', 'text'):
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return log_format

    @field_validator('MAX_NESTING_DEPTH', mode='after')
    @classmethod
    def validate_max_nesting_depth(cls, v):
        """Depth must allow at least one level of nesting."""
        if v < 1:
            raise ValueError("MAX_NESTING_DEPTH must be at least 1")
        return v


settings = Settings()
