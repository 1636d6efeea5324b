"""Endpoint managers, one per GitHub REST API family.

Every manager accepts the same constructor arguments (see
``github_manager.core.manager.GitHubManager``) and can share a requester:

    with GitHubRequester(ClientConfig(token="ghp_...")) as requester:
        runners = GitHubRunnersManager(requester=requester)
        secrets = GitHubSecretsManager(requester=requester)
"""

from .artifacts import GitHubArtifactsManager
from .checks import GitHubCheckRunsManager, GitHubCheckSuitesManager
from .migrations import GitHubMigrationsManager
from .packages import GitHubPackagesManager
from .permissions import GitHubPermissionsManager
from .rate_limit import GitHubRateLimitManager
from .reactions import GitHubReactionsManager
from .releases import GitHubReleasesManager
from .runners import GitHubRunnersManager
from .secrets import GitHubSecretsManager, seal_secret
from .webhooks import GitHubWebhooksManager
from .workflows import GitHubWorkflowsManager

__all__ = [
    # Actions
    "GitHubArtifactsManager",
    "GitHubPermissionsManager",
    "GitHubRunnersManager",
    "GitHubSecretsManager",
    "GitHubWorkflowsManager",
    "seal_secret",
    # Checks
    "GitHubCheckRunsManager",
    "GitHubCheckSuitesManager",
    # Repositories
    "GitHubReleasesManager",
    "GitHubWebhooksManager",
    "GitHubReactionsManager",
    # Organizations / users
    "GitHubMigrationsManager",
    "GitHubPackagesManager",
    # Account
    "GitHubRateLimitManager",
]
