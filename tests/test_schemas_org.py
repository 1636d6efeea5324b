"""Tests for organization-level records (migrations, packages) and rate limits."""

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from github_manager.schemas import (
    Migration,
    MigrationState,
    Package,
    PackageType,
    PackageVersion,
    PoolRateLimit,
    RateLimit,
    RateLimitPool,
    RateLimitStatus,
    RepoVisibility,
)
from tests.fixtures.github_responses import (
    GITHUB_MIGRATION_RESPONSE,
    GITHUB_PACKAGE_RESPONSE,
    GITHUB_PACKAGE_VERSION_RESPONSE,
    GITHUB_RATE_LIMIT_RESPONSE,
)


class TestMigration:
    """Organization migrations."""

    def test_exported_state(self):
        migration = Migration.from_json(GITHUB_MIGRATION_RESPONSE)

        assert migration.state is MigrationState.EXPORTED
        assert migration.is_exported
        assert migration.lock_repositories is True
        assert [repo.full_name for repo in migration.repositories] == ["octocat/Hello-World"]

    def test_bogus_state_raises(self):
        """Migration state is strict."""
        with pytest.raises(ValidationError):
            Migration.from_json({**GITHUB_MIGRATION_RESPONSE, "state": "bogus"})

    def test_pending_is_not_exported(self):
        migration = Migration.from_json({"id": 1, "state": "pending"})
        assert not migration.is_exported

    def test_missing_state(self):
        migration = Migration.from_json({"id": 1})

        assert migration.state is None
        assert migration.exclude == []


class TestPackages:
    """Packages and package versions."""

    def test_package(self):
        package = Package.from_json(GITHUB_PACKAGE_RESPONSE)

        assert package.package_type is PackageType.CONTAINER
        assert package.visibility is RepoVisibility.PRIVATE
        assert package.version_count == 1
        assert package.owner is not None and package.owner.login == "octocat"

    def test_unknown_package_type_raises(self):
        with pytest.raises(ValidationError):
            Package.from_json({"id": 1, "package_type": "pypi"})

    def test_version_metadata(self):
        version = PackageVersion.from_json(GITHUB_PACKAGE_VERSION_RESPONSE)

        assert version.metadata is not None
        assert version.metadata.package_type is PackageType.CONTAINER
        assert version.metadata.container is not None
        assert version.metadata.container.tags == ["latest"]
        assert version.deleted_at_timestamp == -1


class TestRateLimit:
    """Rate limit pools."""

    def test_pools(self):
        rate_limit = RateLimit.from_json(GITHUB_RATE_LIMIT_RESPONSE)

        assert set(rate_limit.resources) == {"core", "search", "graphql"}
        core = rate_limit.get_pool(RateLimitPool.CORE)
        assert core is not None
        assert core.limit == 5000
        assert core.remaining == 4999
        assert rate_limit.core == core

    def test_missing_pool(self):
        rate_limit = RateLimit.from_json(GITHUB_RATE_LIMIT_RESPONSE)
        assert rate_limit.get_pool(RateLimitPool.SCIM) is None

    def test_core_falls_back_to_rate(self):
        rate_limit = RateLimit.from_json({"rate": {"limit": 60, "remaining": 59, "used": 1}})

        assert rate_limit.core is not None
        assert rate_limit.core.limit == 60

    def test_reset_at(self):
        pool = PoolRateLimit(limit=5000, remaining=1, used=4999, reset=1704067200)

        assert pool.reset_at == datetime(2024, 1, 1, tzinfo=UTC)
        assert pool.seconds_until_reset == 0

    def test_unknown_reset(self):
        pool = PoolRateLimit(limit=60, remaining=60)

        assert pool.reset_at is None
        assert pool.seconds_until_reset == 0

    def test_seconds_until_future_reset(self):
        reset = int((datetime.now(UTC) + timedelta(minutes=10)).timestamp())
        pool = PoolRateLimit(limit=60, remaining=60, reset=reset)

        assert 0 < pool.seconds_until_reset <= 600

    def test_percentages(self):
        pool = PoolRateLimit(limit=30, remaining=18, used=12)

        assert pool.usage_percent == pytest.approx(40.0)
        assert pool.remaining_percent == pytest.approx(60.0)

    def test_zero_limit_counts_as_fully_used(self):
        assert PoolRateLimit().usage_percent == 100.0

    @pytest.mark.parametrize(
        ("remaining", "expected"),
        [
            (5000, RateLimitStatus.HEALTHY),
            (2000, RateLimitStatus.WARNING),
            (500, RateLimitStatus.CRITICAL),
            (0, RateLimitStatus.EXHAUSTED),
        ],
    )
    def test_status(self, remaining: int, expected: RateLimitStatus):
        pool = PoolRateLimit(limit=5000, remaining=remaining, used=5000 - remaining)
        assert pool.get_status() is expected

    def test_computed_fields_serialized(self):
        dumped = PoolRateLimit(limit=100, remaining=25, used=75).model_dump()

        assert dumped["usage_percent"] == pytest.approx(75.0)
        assert dumped["remaining_percent"] == pytest.approx(25.0)
