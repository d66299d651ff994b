"""Tests for configuration management module."""

import logging
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from document_tables.config import ONENOTE_NAMESPACE, Settings


class TestSettings:
    """Tests for the Settings class."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.namespace == ONENOTE_NAMESPACE
        assert settings.namespace_prefix == "one"
        assert settings.default_column_width == 1.0
        assert settings.log_level == "INFO"
        assert settings.debug is False

    def test_env_overrides(self) -> None:
        """Settings should be read from DT_ prefixed variables."""
        env = {
            "DT_NAMESPACE": "urn:example:doc",
            "DT_NAMESPACE_PREFIX": "doc",
            "DT_DEFAULT_COLUMN_WIDTH": "2.5",
            "DT_LOG_LEVEL": "debug",
            "DT_DEBUG": "true",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.namespace == "urn:example:doc"
        assert settings.namespace_prefix == "doc"
        assert settings.default_column_width == 2.5
        assert settings.log_level == "DEBUG"
        assert settings.log_level_int == logging.DEBUG
        assert settings.debug is True

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(_env_file=None, log_level="LOUD")

    def test_blank_namespace_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, namespace="  ")

    def test_negative_default_width_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_column_width=-1.0)

    def test_to_safe_dict(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            data = Settings(_env_file=None).to_safe_dict()
        assert data["namespace_prefix"] == "one"
        assert set(data) == {
            "namespace",
            "namespace_prefix",
            "default_column_width",
            "log_level",
            "debug",
        }
