"""Rate limit status of the authenticated token."""

from typing import Any

from github_manager.core import paths
from github_manager.core.manager import GitHubManager
from github_manager.core.paths import RATE_LIMIT
from github_manager.core.results import ReturnFormat
from github_manager.schemas import RateLimit


class GitHubRateLimitManager(GitHubManager):
    """Query remaining quota. Calling ``/rate_limit`` does not count against it."""

    def get_rate_limit(self, *, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT) -> RateLimit | Any:
        """GET /rate_limit"""
        return self.fetch_as(paths.join(RATE_LIMIT), RateLimit, fmt)
