"""Pydantic records for GitHub REST API responses.

This module provides the JSON decoding layer: the generic ``JsonView``,
the enum coercion helper, the record base classes and one module of
records per endpoint family.
"""

from .artifacts import Artifact, ArtifactsList, ArtifactWorkflowRun
from .base import (
    GitHubList,
    GitHubModel,
    GitHubResponse,
    decode,
    epoch_millis,
    timestamp_property,
)
from .checks import (
    AutoTriggerCheck,
    CheckRun,
    CheckRunAnnotation,
    CheckRunOutput,
    CheckRunsList,
    CheckSuite,
    CheckSuiteReference,
    CheckSuitesList,
    CheckSuitesPreferences,
    HeadCommit,
)
from .common import (
    GitHubApp,
    MinimalPullRequest,
    MinimalRepository,
    Reactions,
    RepositoriesList,
    User,
)
from .enums import (
    AccessLevel,
    AllowedActions,
    AnnotationLevel,
    AssetState,
    CheckConclusion,
    CheckRunFilter,
    CheckStatus,
    Direction,
    EnabledItems,
    GitHubEnum,
    MigrationState,
    PackageType,
    ReactionContent,
    RepoVisibility,
    RunnerLabelType,
    UnknownEnumValueError,
    Visibility,
    WorkflowPermissions,
    WorkflowRunStatus,
    WorkflowState,
    lenient_enum,
    strict_enum,
)
from .json_view import JsonView
from .migrations import Migration
from .packages import Package, PackageVersion, PackageVersionMetadata
from .permissions import (
    AllowedActionsSettings,
    DefaultWorkflowPermissions,
    OrganizationActionsPermissions,
    RepositoryActionsPermissions,
    WorkflowAccess,
)
from .rate_limit import PoolRateLimit, RateLimit, RateLimitPool, RateLimitStatus
from .reactions import Reaction
from .releases import Release, ReleaseAsset, ReleaseNotes
from .runners import (
    Runner,
    RunnerApplication,
    RunnerLabel,
    RunnerLabelsList,
    RunnersList,
    RunnerToken,
)
from .secrets import PublicKey, Secret, SecretsList
from .webhooks import RepositoryWebhook, WebhookConfig, WebhookLastResponse
from .workflows import (
    Billable,
    Workflow,
    WorkflowRun,
    WorkflowRunsList,
    WorkflowsList,
    WorkflowUsage,
)

__all__ = [
    # Base
    "GitHubList",
    "GitHubModel",
    "GitHubResponse",
    "JsonView",
    "decode",
    "epoch_millis",
    "timestamp_property",
    # Enums
    "AccessLevel",
    "AllowedActions",
    "AnnotationLevel",
    "AssetState",
    "CheckConclusion",
    "CheckRunFilter",
    "CheckStatus",
    "Direction",
    "EnabledItems",
    "GitHubEnum",
    "MigrationState",
    "PackageType",
    "ReactionContent",
    "RepoVisibility",
    "RunnerLabelType",
    "UnknownEnumValueError",
    "Visibility",
    "WorkflowPermissions",
    "WorkflowRunStatus",
    "WorkflowState",
    "lenient_enum",
    "strict_enum",
    # Shared
    "GitHubApp",
    "MinimalPullRequest",
    "MinimalRepository",
    "Reactions",
    "RepositoriesList",
    "User",
    # Permissions
    "AllowedActionsSettings",
    "DefaultWorkflowPermissions",
    "OrganizationActionsPermissions",
    "RepositoryActionsPermissions",
    "WorkflowAccess",
    # Secrets
    "PublicKey",
    "Secret",
    "SecretsList",
    # Runners
    "Runner",
    "RunnerApplication",
    "RunnerLabel",
    "RunnerLabelsList",
    "RunnerToken",
    "RunnersList",
    # Workflows
    "Billable",
    "Workflow",
    "WorkflowRun",
    "WorkflowRunsList",
    "WorkflowUsage",
    "WorkflowsList",
    # Artifacts
    "Artifact",
    "ArtifactWorkflowRun",
    "ArtifactsList",
    # Checks
    "AutoTriggerCheck",
    "CheckRun",
    "CheckRunAnnotation",
    "CheckRunOutput",
    "CheckRunsList",
    "CheckSuite",
    "CheckSuiteReference",
    "CheckSuitesList",
    "CheckSuitesPreferences",
    "HeadCommit",
    # Releases
    "Release",
    "ReleaseAsset",
    "ReleaseNotes",
    # Packages
    "Package",
    "PackageVersion",
    "PackageVersionMetadata",
    # Migrations
    "Migration",
    # Reactions
    "Reaction",
    # Webhooks
    "RepositoryWebhook",
    "WebhookConfig",
    "WebhookLastResponse",
    # Rate limit
    "PoolRateLimit",
    "RateLimit",
    "RateLimitPool",
    "RateLimitStatus",
]
