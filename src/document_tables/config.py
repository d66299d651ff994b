"""Configuration management for the document table model.

This module provides centralized configuration using pydantic-settings.
All configuration options can be set via environment variables with the
DT_ prefix, or via a .env file in the project root.

Environment Variables:
    DT_NAMESPACE: XML namespace URI for newly created tables
        (default: OneNote 2013 namespace)
    DT_NAMESPACE_PREFIX: Prefix bound to the namespace on output (default: one)
    DT_DEFAULT_COLUMN_WIDTH: Width of pre-populated columns (default: 1.0)
    DT_LOG_LEVEL: Logging level (default: INFO)
    DT_DEBUG: Enable debug mode (default: false)
"""

import logging
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ONENOTE_NAMESPACE = "http://schemas.microsoft.com/office/onenote/2013/onenote"


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    Example .env file:
        DT_NAMESPACE_PREFIX=one
        DT_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="DT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # =========================================================================
    # Document Format Settings
    # =========================================================================

    namespace: str = ONENOTE_NAMESPACE
    """Namespace URI used for tables created from scratch."""

    namespace_prefix: str = "one"
    """Prefix bound to the namespace when serializing new tables."""

    default_column_width: float = 1.0
    """Width given to columns when a table is pre-populated with N columns."""

    # =========================================================================
    # Logging Settings
    # =========================================================================

    log_level: str = "INFO"
    """Logging level: DEBUG, INFO, WARNING, ERROR, or CRITICAL."""

    debug: bool = False
    """Enable debug mode with additional logging."""

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return upper_v

    @field_validator("namespace", "namespace_prefix")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Namespace URI and prefix must be non-empty."""
        if not v.strip():
            raise ValueError("namespace settings must be non-empty strings")
        return v.strip()

    @field_validator("default_column_width")
    @classmethod
    def validate_column_width(cls, v: float) -> float:
        """Validate default width is not negative."""
        if v < 0:
            raise ValueError(f"default_column_width must be >= 0, got {v}")
        return v

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def log_level_int(self) -> int:
        """Get log level as integer for logging module."""
        level: int = getattr(logging, self.log_level)
        return level

    def to_safe_dict(self) -> dict[str, Any]:
        """Convert settings to a plain dictionary for logging."""
        return {
            "namespace": self.namespace,
            "namespace_prefix": self.namespace_prefix,
            "default_column_width": self.default_column_width,
            "log_level": self.log_level,
            "debug": self.debug,
        }


# Create the global settings instance
settings = Settings()
