"""Test fixtures for GitHub Manager."""

from .github_responses import (
    GITHUB_CHECK_RUN_RESPONSE,
    GITHUB_MIGRATION_RESPONSE,
    GITHUB_RATE_LIMIT_RESPONSE,
    GITHUB_RELEASE_RESPONSE,
    GITHUB_RUNNER_RESPONSE,
    GITHUB_RUNNERS_RESPONSE,
    GITHUB_SECRETS_RESPONSE,
    GITHUB_USER_RESPONSE,
)

__all__ = [
    "GITHUB_CHECK_RUN_RESPONSE",
    "GITHUB_MIGRATION_RESPONSE",
    "GITHUB_RATE_LIMIT_RESPONSE",
    "GITHUB_RELEASE_RESPONSE",
    "GITHUB_RUNNER_RESPONSE",
    "GITHUB_RUNNERS_RESPONSE",
    "GITHUB_SECRETS_RESPONSE",
    "GITHUB_USER_RESPONSE",
]
