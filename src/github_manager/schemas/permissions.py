"""Records for GitHub Actions permission settings.

See: https://docs.github.com/en/rest/actions/permissions
"""

from typing import Annotated

from pydantic import Field

from .base import GitHubResponse
from .enums import (
    AccessLevel,
    AllowedActions,
    EnabledItems,
    WorkflowPermissions,
    lenient_enum,
)

EnabledItemsField = Annotated[EnabledItems | None, lenient_enum(EnabledItems)]
AllowedActionsField = Annotated[AllowedActions | None, lenient_enum(AllowedActions)]


class OrganizationActionsPermissions(GitHubResponse):
    """Actions policy of an organization.

    Maps to: GET /orgs/{org}/actions/permissions
    """

    enabled_repositories: EnabledItemsField = Field(
        default=None, description="Which repositories may run Actions"
    )
    allowed_actions: AllowedActionsField = Field(
        default=None, description="Which actions may run"
    )
    selected_repositories_url: str | None = Field(
        default=None, description="API URL listing the selected repositories"
    )
    selected_actions_url: str | None = Field(
        default=None, description="API URL of the selected-actions settings"
    )


class RepositoryActionsPermissions(GitHubResponse):
    """Actions policy of a repository.

    Maps to: GET /repos/{owner}/{repo}/actions/permissions
    """

    enabled: bool = Field(default=False, description="Whether Actions is enabled")
    allowed_actions: AllowedActionsField = Field(
        default=None, description="Which actions may run"
    )
    selected_actions_url: str | None = Field(
        default=None, description="API URL of the selected-actions settings"
    )


class AllowedActionsSettings(GitHubResponse):
    """Allow-list used when ``allowed_actions`` is ``selected``."""

    github_owned_allowed: bool = Field(
        default=False, description="Whether actions created by GitHub are allowed"
    )
    verified_allowed: bool = Field(
        default=False, description="Whether actions from verified creators are allowed"
    )
    patterns_allowed: list[str] = Field(
        default_factory=list, description="Allowed action/workflow patterns"
    )


class DefaultWorkflowPermissions(GitHubResponse):
    """Default GITHUB_TOKEN permissions granted to workflows."""

    default_workflow_permissions: Annotated[
        WorkflowPermissions | None, lenient_enum(WorkflowPermissions)
    ] = Field(default=None, description="read or write")
    can_approve_pull_request_reviews: bool = Field(
        default=False, description="Whether workflows may approve pull requests"
    )


class WorkflowAccess(GitHubResponse):
    """Who outside a private repository may use its actions and workflows."""

    access_level: Annotated[AccessLevel | None, lenient_enum(AccessLevel)] = Field(
        default=None, description="none, user, organization or enterprise"
    )
