"""Records for the GitHub rate limit endpoint.

Maps to: GET /rate_limit
See: https://docs.github.com/en/rest/rate-limit/rate-limit
"""

from datetime import UTC, datetime

from pydantic import Field, computed_field

from .base import GitHubModel, GitHubResponse
from .enums import GitHubEnum


class RateLimitPool(GitHubEnum):
    """GitHub rate limit resource pools.

    Each pool has its own separate quota. Most operations use 'core'.
    """

    CORE = "core"
    SEARCH = "search"
    GRAPHQL = "graphql"
    CODE_SEARCH = "code_search"
    INTEGRATION_MANIFEST = "integration_manifest"
    DEPENDENCY_SNAPSHOTS = "dependency_snapshots"
    CODE_SCANNING_UPLOAD = "code_scanning_upload"
    ACTIONS_RUNNER_REGISTRATION = "actions_runner_registration"
    SCIM = "scim"


class RateLimitStatus(GitHubEnum):
    """Rate limit health status.

    Thresholds are configurable but defaults are:
    - HEALTHY: > 50% remaining
    - WARNING: 20-50% remaining
    - CRITICAL: below 20% remaining
    - EXHAUSTED: 0 remaining
    """

    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"
    EXHAUSTED = "exhausted"


class PoolRateLimit(GitHubModel):
    """Quota state of a single resource pool."""

    limit: int = Field(default=0, ge=0, description="Maximum requests allowed per window")
    remaining: int = Field(default=0, ge=0, description="Requests remaining in current window")
    used: int = Field(default=0, ge=0, description="Requests used in current window")
    reset: int = Field(default=0, description="Epoch seconds when the window resets")

    @property
    def reset_at(self) -> datetime | None:
        """UTC datetime when the limit resets (None if unknown)."""
        if self.reset <= 0:
            return None
        return datetime.fromtimestamp(self.reset, tz=UTC)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def usage_percent(self) -> float:
        """Percentage of rate limit consumed (0.0 to 100.0)."""
        if self.limit == 0:
            return 100.0
        return (self.used / self.limit) * 100

    @computed_field  # type: ignore[prop-decorator]
    @property
    def remaining_percent(self) -> float:
        """Percentage of rate limit remaining (0.0 to 100.0)."""
        return 100.0 - self.usage_percent

    @property
    def seconds_until_reset(self) -> int:
        """Seconds until rate limit resets (0 if already past or unknown)."""
        if self.reset_at is None:
            return 0
        delta = self.reset_at - datetime.now(UTC)
        return max(0, int(delta.total_seconds()))

    def get_status(
        self,
        healthy_threshold: float = 50.0,
        warning_threshold: float = 20.0,
    ) -> RateLimitStatus:
        """Determine rate limit health status.

        Args:
            healthy_threshold: % remaining at or above which is HEALTHY
            warning_threshold: % remaining at or above which is WARNING

        Returns:
            RateLimitStatus enum value
        """
        if self.remaining == 0:
            return RateLimitStatus.EXHAUSTED
        if self.remaining_percent >= healthy_threshold:
            return RateLimitStatus.HEALTHY
        if self.remaining_percent >= warning_threshold:
            return RateLimitStatus.WARNING
        return RateLimitStatus.CRITICAL


class RateLimit(GitHubResponse):
    """Quota across every resource pool for the authenticated token."""

    resources: dict[str, PoolRateLimit] = Field(
        default_factory=dict, description="Rate limits by pool name"
    )
    rate: PoolRateLimit | None = Field(default=None, description="Core pool (legacy key)")

    def get_pool(self, pool: RateLimitPool | str) -> PoolRateLimit | None:
        """Get rate limit for a specific pool.

        Args:
            pool: Rate limit pool to query

        Returns:
            PoolRateLimit or None if the response has no data for that pool
        """
        return self.resources.get(str(pool))

    @property
    def core(self) -> PoolRateLimit | None:
        """Convenience accessor for core pool (most common)."""
        return self.get_pool(RateLimitPool.CORE) or self.rate
