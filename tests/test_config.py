"""Tests for configuration settings."""

import pytest
from pydantic import ValidationError

from github_manager.config import (
    DEFAULT_BASE_URL,
    ClientConfig,
    LoggingConfig,
    Settings,
    get_settings,
)


class TestSettings:
    """Tests for Settings class."""

    def test_settings_defaults(self):
        """Test default values are correct."""
        settings = Settings(_env_file=None)

        assert settings.github_token == ""
        assert settings.github_api_url == DEFAULT_BASE_URL
        assert settings.request_timeout is None
        assert settings.default_error_message is None
        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.logging == LoggingConfig()

    def test_settings_from_env(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("GITHUB_TOKEN", "test_token_123")
        monkeypatch.setenv("REQUEST_TIMEOUT", "12.5")
        monkeypatch.setenv("DEFAULT_ERROR_MESSAGE", "GitHub said no")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.github_token == "test_token_123"
        assert settings.request_timeout == 12.5
        assert settings.default_error_message == "GitHub said no"
        assert settings.log_level == "DEBUG"

    def test_settings_nested_logging_from_env(self, monkeypatch):
        """Nested logging options use a double-underscore delimiter."""
        monkeypatch.setenv("LOGGING__LOG_FILE", "/tmp/ghmanager.log")
        monkeypatch.setenv("LOGGING__SERIALIZE", "true")

        settings = Settings(_env_file=None)

        assert settings.logging.log_file == "/tmp/ghmanager.log"
        assert settings.logging.serialize is True

    def test_settings_timeout_must_be_positive(self, monkeypatch):
        """A zero or negative timeout is rejected."""
        monkeypatch.setenv("REQUEST_TIMEOUT", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_settings_log_level_validation(self, monkeypatch):
        """Test that invalid log level is rejected."""
        monkeypatch.setenv("LOG_LEVEL", "INVALID")

        with pytest.raises(ValueError):
            Settings(_env_file=None)

    def test_settings_case_insensitive(self, monkeypatch):
        """Test that env var names are case-insensitive."""
        monkeypatch.setenv("github_token", "lower_token")

        settings = Settings(_env_file=None)

        assert settings.github_token == "lower_token"


class TestClientConfig:
    """Tests for the per-manager ClientConfig."""

    def test_minimal(self):
        """Only a token is required."""
        config = ClientConfig(token="ghp_abc")

        assert config.token == "ghp_abc"
        assert config.base_url == DEFAULT_BASE_URL
        assert config.request_timeout is None
        assert config.default_error_message is None

    def test_empty_token_rejected(self):
        """An empty token fails validation."""
        with pytest.raises(ValidationError):
            ClientConfig(token="")

    def test_frozen(self):
        """Config cannot be mutated after construction."""
        config = ClientConfig(token="ghp_abc")

        with pytest.raises(ValidationError):
            config.token = "other"  # type: ignore[misc]

    def test_from_settings(self):
        """Factory copies the GitHub section of Settings."""
        settings = Settings(
            _env_file=None,
            github_token="ghp_from_env",
            request_timeout=5,
            default_error_message="nope",
            github_api_url="https://ghe.example.com/api/v3",
        )

        config = ClientConfig.from_settings(settings)

        assert config.token == "ghp_from_env"
        assert config.request_timeout == 5
        assert config.default_error_message == "nope"
        assert config.base_url == "https://ghe.example.com/api/v3"


class TestGetSettings:
    """Tests for get_settings function."""

    def test_get_settings_returns_settings(self):
        """get_settings returns a Settings instance."""
        assert isinstance(get_settings(), Settings)

    def test_get_settings_is_cached(self):
        """Repeated calls return the same instance until the cache is cleared."""
        first = get_settings()

        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings() is not first
