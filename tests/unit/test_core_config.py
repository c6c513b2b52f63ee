"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values
- Settings loading from environment variables
- Validation (log level, base URL, archive suffixes, chunk size)
- Environment detection
- Cached singleton behavior
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from docshelf.core.config import Settings, get_settings
from docshelf.core.enums import Environment


@pytest.fixture
def clean_env():
    """Run the test with no environment variables set."""
    with patch.dict(os.environ, {}, clear=True):
        yield


def make_settings(**env: str) -> Settings:
    with patch.dict(os.environ, env, clear=True):
        return Settings()


@pytest.mark.unit
class TestSettingsDefaults:
    """Test Settings default values."""

    def test_defaults(self, clean_env):
        """Test every setting has a usable default."""
        settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.app_name == "Docshelf"
        assert settings.api_title == "Docshelf API"
        assert settings.api_base_url is None
        assert settings.catalog_path == Path("config/catalog.yaml")
        assert settings.storage_path == Path("storage")
        assert settings.archive_suffixes == [".zip", ".jar"]
        assert settings.stream_chunk_size == 65536


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test Settings loading from environment variables."""

    def test_paths_from_environment(self):
        """Test catalog and storage paths are read as Paths."""
        settings = make_settings(
            CATALOG_PATH="/etc/docshelf/catalog.yaml",
            STORAGE_PATH="/srv/docs",
        )

        assert settings.catalog_path == Path("/etc/docshelf/catalog.yaml")
        assert settings.storage_path == Path("/srv/docs")

    def test_environment_names_are_case_insensitive(self):
        """Test variable names match regardless of case."""
        settings = make_settings(environment="production")

        assert settings.environment == Environment.PRODUCTION


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_is_normalized(self):
        """Test log level names are upper-cased."""
        assert make_settings(LOG_LEVEL=" debug ").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        """Test unknown level names are rejected."""
        with pytest.raises(ValidationError):
            make_settings(LOG_LEVEL="LOUD")

    def test_api_base_url_trailing_slash_removed(self):
        """Test trailing slashes are stripped from the base URL."""
        settings = make_settings(API_BASE_URL="https://docs.example.com/")

        assert settings.api_base_url == "https://docs.example.com"

    def test_archive_suffixes_parsed_from_csv(self):
        """Test comma-separated suffixes gain a leading dot."""
        settings = make_settings(ARCHIVE_SUFFIXES="jar, .zip,,")

        assert settings.archive_suffixes == [".jar", ".zip"]

    def test_empty_archive_suffixes_rejected(self):
        """Test at least one suffix is required."""
        with pytest.raises(ValidationError):
            make_settings(ARCHIVE_SUFFIXES=" , ")

    @pytest.mark.parametrize("size", ["0", "-1"])
    def test_non_positive_chunk_size_rejected(self, size):
        """Test the streaming chunk size must be positive."""
        with pytest.raises(ValidationError):
            make_settings(STREAM_CHUNK_SIZE=size)


@pytest.mark.unit
class TestEnvironmentDetection:
    """Test environment convenience properties."""

    @pytest.mark.parametrize(
        ("value", "development", "testing", "production"),
        [
            ("development", True, False, False),
            ("testing", False, True, False),
            ("ci", False, False, False),
            ("production", False, False, True),
        ],
    )
    def test_environment_properties(self, value, development, testing, production):
        """Test is_development/is_testing/is_production."""
        settings = make_settings(ENVIRONMENT=value)

        assert settings.is_development is development
        assert settings.is_testing is testing
        assert settings.is_production is production


@pytest.mark.unit
class TestGetSettings:
    """Test cached settings accessor."""

    def test_get_settings_is_cached(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()
