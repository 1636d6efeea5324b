"""GitHub Manager - typed client for the GitHub REST API."""

__version__ = "0.1.0"

from github_manager.config import ClientConfig, Settings, get_settings
from github_manager.core import (
    GitHubAuthenticationError,
    GitHubClientError,
    GitHubDecodeError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubRequester,
    GitHubTransportError,
    Params,
    ReturnFormat,
    WriteResult,
)
from github_manager.core.manager import GitHubManager
from github_manager.managers import (
    GitHubArtifactsManager,
    GitHubCheckRunsManager,
    GitHubCheckSuitesManager,
    GitHubMigrationsManager,
    GitHubPackagesManager,
    GitHubPermissionsManager,
    GitHubRateLimitManager,
    GitHubReactionsManager,
    GitHubReleasesManager,
    GitHubRunnersManager,
    GitHubSecretsManager,
    GitHubWebhooksManager,
    GitHubWorkflowsManager,
)

__all__ = [
    "__version__",
    # Configuration
    "ClientConfig",
    "Settings",
    "get_settings",
    # Core
    "GitHubManager",
    "GitHubRequester",
    "Params",
    "ReturnFormat",
    "WriteResult",
    # Exceptions
    "GitHubAuthenticationError",
    "GitHubClientError",
    "GitHubDecodeError",
    "GitHubNotFoundError",
    "GitHubRateLimitError",
    "GitHubTransportError",
    # Managers
    "GitHubArtifactsManager",
    "GitHubCheckRunsManager",
    "GitHubCheckSuitesManager",
    "GitHubMigrationsManager",
    "GitHubPackagesManager",
    "GitHubPermissionsManager",
    "GitHubRateLimitManager",
    "GitHubReactionsManager",
    "GitHubReleasesManager",
    "GitHubRunnersManager",
    "GitHubSecretsManager",
    "GitHubWebhooksManager",
    "GitHubWorkflowsManager",
]
