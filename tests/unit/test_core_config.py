"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from UTILBOX_ environment variables
- Environment detection
- Validation (log level, page sizes)
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from utilbox.core.config import Settings, get_settings
from utilbox.core.enums import Environment


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Rebuild cached settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.unit
class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    """Test Settings default values."""

    def test_defaults(self):
        """Test defaults apply with no environment variables."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.default_page_size == 20
        assert settings.max_page_size == 100
        assert settings.is_development


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test loading from UTILBOX_ environment variables."""

    def test_reads_prefixed_variables(self):
        """Test UTILBOX_* variables override defaults."""
        env_values = {
            "UTILBOX_ENVIRONMENT": "production",
            "UTILBOX_LOG_LEVEL": "debug",
            "UTILBOX_LOG_JSON": "true",
            "UTILBOX_DEFAULT_PAGE_SIZE": "10",
            "UTILBOX_MAX_PAGE_SIZE": "50",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.is_production
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True
        assert settings.default_page_size == 10
        assert settings.max_page_size == 50

    def test_unprefixed_variables_ignored(self):
        """Test variables without the prefix do not apply."""
        with patch.dict(os.environ, {"LOG_LEVEL": "ERROR"}, clear=True):
            settings = Settings()

        assert settings.log_level == "INFO"

    @pytest.mark.parametrize(
        ("value", "property_name"),
        [
            ("development", "is_development"),
            ("testing", "is_testing"),
            ("ci", "is_ci"),
            ("production", "is_production"),
        ],
    )
    def test_environment_properties(self, value, property_name):
        """Test exactly one environment property is true."""
        with patch.dict(os.environ, {"UTILBOX_ENVIRONMENT": value}, clear=True):
            settings = Settings()

        flags = {
            name: getattr(settings, name)
            for name in ("is_development", "is_testing", "is_ci", "is_production")
        }
        assert flags.pop(property_name) is True
        assert not any(flags.values())


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_invalid_log_level_rejected(self):
        """Test an unknown log level fails validation."""
        with pytest.raises(ValidationError):
            Settings(log_level="VERBOSE")

    def test_invalid_environment_rejected(self):
        """Test an unknown environment fails validation."""
        with pytest.raises(ValidationError):
            Settings(environment="staging")

    def test_page_size_must_be_positive(self):
        """Test a zero page size fails validation."""
        with pytest.raises(ValidationError):
            Settings(default_page_size=0)

    def test_default_page_size_cannot_exceed_max(self):
        """Test default_page_size greater than max_page_size is rejected."""
        with pytest.raises(ValidationError, match="default_page_size"):
            Settings(default_page_size=200, max_page_size=100)


@pytest.mark.unit
class TestGetSettings:
    """Test cached settings accessor."""

    def test_get_settings_is_cached(self):
        """Test repeated calls return the same instance."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        """Test clearing the cache picks up new environment values."""
        with patch.dict(os.environ, {"UTILBOX_MAX_PAGE_SIZE": "30"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().max_page_size == 30
