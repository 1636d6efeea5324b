"""Closed value sets used by GitHub records, and their coercion rules.

Every enum derives from ``GitHubEnum``, which knows how to turn an
external string into a member:

1. exact value match (``"in_progress"``, ``"+1"``)
2. member name match, case-insensitive (``"IN_PROGRESS"``, ``"plus_one"``)
3. class-specific aliases (``ReactionContent``: leading ``+`` / ``-``)

Anything else raises ``UnknownEnumValueError``. Record fields pick a policy
with ``strict_enum`` (unknown values fail validation) or ``lenient_enum``
(unknown or missing values fall back to a default).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Self, TypeVar

from pydantic import BeforeValidator

E = TypeVar("E", bound="GitHubEnum")


class UnknownEnumValueError(ValueError):
    """Raised when a string cannot be mapped onto an enum member.

    Usually means GitHub added a value this library does not know yet.
    """

    def __init__(self, enum_cls: type[GitHubEnum], value: Any) -> None:
        super().__init__(f"Unknown {enum_cls.__name__} value: {value!r}")
        self.enum_cls = enum_cls
        self.value = value


class GitHubEnum(StrEnum):
    """Base class for enums parsed from GitHub payloads."""

    @classmethod
    def parse(cls, value: Any) -> Self:
        """
        Resolve a payload value to a member.

        Args:
            value: Raw value from the JSON payload (or a member already)

        Returns:
            The matching member

        Raises:
            UnknownEnumValueError: If no member matches
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownEnumValueError(cls, value)
        try:
            return cls(value)
        except ValueError:
            pass
        member = cls.__members__.get(value.strip().upper().replace("-", "_"))
        if member is not None:
            return member
        alias = cls._from_alias(value)
        if alias is not None:
            return alias
        raise UnknownEnumValueError(cls, value)

    @classmethod
    def parse_or(cls, value: Any, default: E | None = None) -> Self | E | None:
        """Like ``parse`` but returns ``default`` for missing or unknown values."""
        if value is None:
            return default
        try:
            return cls.parse(value)
        except UnknownEnumValueError:
            return default

    @classmethod
    def _from_alias(cls, value: str) -> Self | None:
        return None


def strict_enum(enum_cls: type[GitHubEnum]) -> BeforeValidator:
    """Field validator that rejects unknown values (required enums)."""
    return BeforeValidator(enum_cls.parse)


def lenient_enum(enum_cls: type[GitHubEnum], default: GitHubEnum | None = None) -> BeforeValidator:
    """Field validator that maps unknown values to ``default`` (optional enums)."""
    return BeforeValidator(lambda value: enum_cls.parse_or(value, default))


# -----------------------------------------------------------------------------
# Shared
# -----------------------------------------------------------------------------
class Visibility(GitHubEnum):
    """Which repositories of an organization can use a secret."""

    ALL = "all"
    PRIVATE = "private"
    SELECTED = "selected"


class RepoVisibility(GitHubEnum):
    """Visibility of a repository or package."""

    PUBLIC = "public"
    PRIVATE = "private"
    INTERNAL = "internal"


class Direction(GitHubEnum):
    """Sort direction for list endpoints."""

    ASC = "asc"
    DESC = "desc"


# -----------------------------------------------------------------------------
# Actions
# -----------------------------------------------------------------------------
class EnabledItems(GitHubEnum):
    """Which repositories (or organizations) may run GitHub Actions."""

    ALL = "all"
    NONE = "none"
    SELECTED = "selected"


class AllowedActions(GitHubEnum):
    """Which actions and reusable workflows may run."""

    ALL = "all"
    LOCAL_ONLY = "local_only"
    SELECTED = "selected"


class WorkflowPermissions(GitHubEnum):
    """Default GITHUB_TOKEN permission for workflows."""

    READ = "read"
    WRITE = "write"


class AccessLevel(GitHubEnum):
    """Who outside the repository may use its actions and workflows."""

    NONE = "none"
    USER = "user"
    ORGANIZATION = "organization"
    ENTERPRISE = "enterprise"


class RunnerLabelType(GitHubEnum):
    """Origin of a self-hosted runner label."""

    READ_ONLY = "read-only"
    CUSTOM = "custom"


class WorkflowState(GitHubEnum):
    """Lifecycle state of a workflow file."""

    ACTIVE = "active"
    DELETED = "deleted"
    DISABLED_FORK = "disabled_fork"
    DISABLED_INACTIVITY = "disabled_inactivity"
    DISABLED_MANUALLY = "disabled_manually"


class WorkflowRunStatus(GitHubEnum):
    """Status (or conclusion) filter values for workflow runs."""

    COMPLETED = "completed"
    ACTION_REQUIRED = "action_required"
    CANCELLED = "cancelled"
    FAILURE = "failure"
    NEUTRAL = "neutral"
    SKIPPED = "skipped"
    STALE = "stale"
    SUCCESS = "success"
    TIMED_OUT = "timed_out"
    IN_PROGRESS = "in_progress"
    QUEUED = "queued"
    REQUESTED = "requested"
    WAITING = "waiting"
    PENDING = "pending"


# -----------------------------------------------------------------------------
# Checks
# -----------------------------------------------------------------------------
class CheckStatus(GitHubEnum):
    """Status of a check run or check suite."""

    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    WAITING = "waiting"
    REQUESTED = "requested"
    PENDING = "pending"


class CheckConclusion(GitHubEnum):
    """Final conclusion of a completed check run or suite."""

    SUCCESS = "success"
    FAILURE = "failure"
    NEUTRAL = "neutral"
    CANCELLED = "cancelled"
    SKIPPED = "skipped"
    TIMED_OUT = "timed_out"
    ACTION_REQUIRED = "action_required"
    STARTUP_FAILURE = "startup_failure"
    STALE = "stale"


class CheckRunFilter(GitHubEnum):
    """Which check runs to list for a suite or ref."""

    LATEST = "latest"
    ALL = "all"


class AnnotationLevel(GitHubEnum):
    """Severity of a check run annotation."""

    NOTICE = "notice"
    WARNING = "warning"
    FAILURE = "failure"


# -----------------------------------------------------------------------------
# Releases / Packages / Migrations
# -----------------------------------------------------------------------------
class AssetState(GitHubEnum):
    """Upload state of a release asset."""

    UPLOADED = "uploaded"
    OPEN = "open"


class PackageType(GitHubEnum):
    """Registry a package lives in."""

    NPM = "npm"
    MAVEN = "maven"
    RUBYGEMS = "rubygems"
    DOCKER = "docker"
    NUGET = "nuget"
    CONTAINER = "container"


class MigrationState(GitHubEnum):
    """Progress of an organization migration export."""

    PENDING = "pending"
    EXPORTING = "exporting"
    EXPORTED = "exported"
    FAILED = "failed"


# -----------------------------------------------------------------------------
# Reactions
# -----------------------------------------------------------------------------
class ReactionContent(GitHubEnum):
    """Emoji a reaction carries."""

    PLUS_ONE = "+1"
    MINUS_ONE = "-1"
    LAUGH = "laugh"
    CONFUSED = "confused"
    HEART = "heart"
    HOORAY = "hooray"
    ROCKET = "rocket"
    EYES = "eyes"

    @classmethod
    def _from_alias(cls, value: str) -> Self | None:
        stripped = value.strip()
        if stripped.startswith("+"):
            return cls.PLUS_ONE
        if stripped.startswith("-"):
            return cls.MINUS_ONE
        return None
