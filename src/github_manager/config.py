"""Configuration settings for GitHub Manager."""

from functools import lru_cache
from typing import Literal, Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.github.com"


class LoggingConfig(BaseModel):
    """Configuration for logging behavior.

    Controls file logging, rotation, and output format.
    """

    log_file: str | None = Field(
        default=None,
        description="Optional path for file logging (enables rotation)",
    )
    rotation: str = Field(
        default="10 MB",
        description="When to rotate log file (e.g., '10 MB', '1 day')",
    )
    retention: str = Field(
        default="7 days",
        description="How long to keep rotated logs",
    )
    serialize: bool = Field(
        default=False,
        description="If True, output JSON format to file",
    )


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    # --------------------------------------------------------------------------
    # GitHub API
    # --------------------------------------------------------------------------
    github_token: str = Field(
        default="",
        description="GitHub personal access token",
    )
    github_api_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the GitHub REST API",
    )
    request_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds (None = githubkit default)",
    )
    default_error_message: str | None = Field(
        default=None,
        description="Message reported by failed writes when GitHub sends no body",
    )

    # --------------------------------------------------------------------------
    # Application
    # --------------------------------------------------------------------------
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    # --------------------------------------------------------------------------
    # Logging Configuration
    # --------------------------------------------------------------------------
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration (file output, rotation)",
    )


class ClientConfig(BaseModel):
    """Immutable connection settings held by a manager instance.

    Every manager owns (or shares, through its requester) exactly one of
    these; there is no process-wide credential state.
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(min_length=1, description="GitHub personal access token")
    default_error_message: str | None = Field(
        default=None,
        description="Fallback error text for failed writes without a response body",
    )
    request_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds",
    )
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Self:
        """
        Factory method to build a client configuration from environment settings.

        Args:
            settings: Settings instance (defaults to the cached application settings)

        Returns:
            ClientConfig carrying the configured token, timeout and error message
        """
        settings = settings or get_settings()
        return cls(
            token=settings.github_token,
            default_error_message=settings.default_error_message,
            request_timeout=settings.request_timeout,
            base_url=settings.github_api_url,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
