"""GitHub Actions permission settings for organizations and repositories.

See: https://docs.github.com/en/rest/actions/permissions
"""

from collections.abc import Iterable
from typing import Any

from github_manager.core import paths
from github_manager.core.manager import GitHubManager
from github_manager.core.params import Params
from github_manager.core.paths import ACTIONS, PERMISSIONS, REPOSITORIES
from github_manager.core.results import ReturnFormat, WriteResult
from github_manager.schemas import (
    AccessLevel,
    AllowedActions,
    AllowedActionsSettings,
    DefaultWorkflowPermissions,
    EnabledItems,
    OrganizationActionsPermissions,
    RepositoriesList,
    RepositoryActionsPermissions,
    WorkflowAccess,
    WorkflowPermissions,
)

SELECTED_ACTIONS = "selected-actions"
WORKFLOW = "workflow"
ACCESS = "access"


class GitHubPermissionsManager(GitHubManager):
    """Read and change which actions may run, where, and with what token rights."""

    # -------------------------------------------------------------------------
    # Organization
    # -------------------------------------------------------------------------
    def get_organization_permissions(
        self,
        org: str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> OrganizationActionsPermissions | Any:
        """GET /orgs/{org}/actions/permissions"""
        return self.fetch_as(
            paths.org(org, ACTIONS, PERMISSIONS),
            OrganizationActionsPermissions,
            fmt,
        )

    def set_organization_permissions(
        self,
        org: str,
        enabled_repositories: EnabledItems,
        allowed_actions: AllowedActions | None = None,
    ) -> WriteResult:
        """PUT /orgs/{org}/actions/permissions"""
        return self._write(
            "PUT",
            paths.org(org, ACTIONS, PERMISSIONS),
            body=Params(
                enabled_repositories=enabled_repositories, allowed_actions=allowed_actions
            ),
        )

    def list_enabled_repositories(
        self,
        org: str,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> RepositoriesList | Any:
        """GET /orgs/{org}/actions/permissions/repositories"""
        return self.fetch_as(
            paths.org(org, ACTIONS, PERMISSIONS, REPOSITORIES),
            RepositoriesList,
            fmt,
            params,
        )

    def set_enabled_repositories(
        self, org: str, repository_ids: Iterable[int]
    ) -> WriteResult:
        """PUT /orgs/{org}/actions/permissions/repositories"""
        return self._write(
            "PUT",
            paths.org(org, ACTIONS, PERMISSIONS, REPOSITORIES),
            body={"selected_repository_ids": list(repository_ids)},
        )

    def enable_repository(self, org: str, repository_id: int) -> WriteResult:
        """PUT /orgs/{org}/actions/permissions/repositories/{repository_id}"""
        return self._write(
            "PUT", paths.org(org, ACTIONS, PERMISSIONS, REPOSITORIES, repository_id)
        )

    def disable_repository(self, org: str, repository_id: int) -> WriteResult:
        """DELETE /orgs/{org}/actions/permissions/repositories/{repository_id}"""
        return self._write(
            "DELETE", paths.org(org, ACTIONS, PERMISSIONS, REPOSITORIES, repository_id)
        )

    def get_organization_allowed_actions(
        self,
        org: str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> AllowedActionsSettings | Any:
        """GET /orgs/{org}/actions/permissions/selected-actions"""
        return self.fetch_as(
            paths.org(org, ACTIONS, PERMISSIONS, SELECTED_ACTIONS),
            AllowedActionsSettings,
            fmt,
        )

    def set_organization_allowed_actions(
        self, org: str, settings: AllowedActionsSettings
    ) -> WriteResult:
        """PUT /orgs/{org}/actions/permissions/selected-actions"""
        return self._write(
            "PUT",
            paths.org(org, ACTIONS, PERMISSIONS, SELECTED_ACTIONS),
            body=_allowed_actions_body(settings),
        )

    def get_organization_workflow_permissions(
        self,
        org: str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> DefaultWorkflowPermissions | Any:
        """GET /orgs/{org}/actions/permissions/workflow"""
        return self.fetch_as(
            paths.org(org, ACTIONS, PERMISSIONS, WORKFLOW),
            DefaultWorkflowPermissions,
            fmt,
        )

    def set_organization_workflow_permissions(
        self,
        org: str,
        default_workflow_permissions: WorkflowPermissions | None = None,
        can_approve_pull_request_reviews: bool | None = None,
    ) -> WriteResult:
        """PUT /orgs/{org}/actions/permissions/workflow"""
        return self._write(
            "PUT",
            paths.org(org, ACTIONS, PERMISSIONS, WORKFLOW),
            body=Params(
                default_workflow_permissions=default_workflow_permissions,
                can_approve_pull_request_reviews=can_approve_pull_request_reviews,
            ),
        )

    # -------------------------------------------------------------------------
    # Repository
    # -------------------------------------------------------------------------
    def get_repository_permissions(
        self,
        owner: str,
        repo: str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> RepositoryActionsPermissions | Any:
        """GET /repos/{owner}/{repo}/actions/permissions"""
        return self.fetch_as(
            paths.repo(owner, repo, ACTIONS, PERMISSIONS),
            RepositoryActionsPermissions,
            fmt,
        )

    def set_repository_permissions(
        self,
        owner: str,
        repo: str,
        enabled: bool,
        allowed_actions: AllowedActions | None = None,
    ) -> WriteResult:
        """PUT /repos/{owner}/{repo}/actions/permissions"""
        return self._write(
            "PUT",
            paths.repo(owner, repo, ACTIONS, PERMISSIONS),
            body=Params(enabled=enabled, allowed_actions=allowed_actions),
        )

    def get_workflow_access(
        self,
        owner: str,
        repo: str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WorkflowAccess | Any:
        """GET /repos/{owner}/{repo}/actions/permissions/access"""
        return self.fetch_as(
            paths.repo(owner, repo, ACTIONS, PERMISSIONS, ACCESS),
            WorkflowAccess,
            fmt,
        )

    def set_workflow_access(
        self, owner: str, repo: str, access_level: AccessLevel
    ) -> WriteResult:
        """PUT /repos/{owner}/{repo}/actions/permissions/access"""
        return self._write(
            "PUT",
            paths.repo(owner, repo, ACTIONS, PERMISSIONS, ACCESS),
            body=Params(access_level=access_level),
        )

    def get_repository_allowed_actions(
        self,
        owner: str,
        repo: str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> AllowedActionsSettings | Any:
        """GET /repos/{owner}/{repo}/actions/permissions/selected-actions"""
        return self.fetch_as(
            paths.repo(owner, repo, ACTIONS, PERMISSIONS, SELECTED_ACTIONS),
            AllowedActionsSettings,
            fmt,
        )

    def set_repository_allowed_actions(
        self, owner: str, repo: str, settings: AllowedActionsSettings
    ) -> WriteResult:
        """PUT /repos/{owner}/{repo}/actions/permissions/selected-actions"""
        return self._write(
            "PUT",
            paths.repo(owner, repo, ACTIONS, PERMISSIONS, SELECTED_ACTIONS),
            body=_allowed_actions_body(settings),
        )

    def get_repository_workflow_permissions(
        self,
        owner: str,
        repo: str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> DefaultWorkflowPermissions | Any:
        """GET /repos/{owner}/{repo}/actions/permissions/workflow"""
        return self.fetch_as(
            paths.repo(owner, repo, ACTIONS, PERMISSIONS, WORKFLOW),
            DefaultWorkflowPermissions,
            fmt,
        )

    def set_repository_workflow_permissions(
        self,
        owner: str,
        repo: str,
        default_workflow_permissions: WorkflowPermissions | None = None,
        can_approve_pull_request_reviews: bool | None = None,
    ) -> WriteResult:
        """PUT /repos/{owner}/{repo}/actions/permissions/workflow"""
        return self._write(
            "PUT",
            paths.repo(owner, repo, ACTIONS, PERMISSIONS, WORKFLOW),
            body=Params(
                default_workflow_permissions=default_workflow_permissions,
                can_approve_pull_request_reviews=can_approve_pull_request_reviews,
            ),
        )


def _allowed_actions_body(settings: AllowedActionsSettings) -> Params:
    return Params(
        github_owned_allowed=settings.github_owned_allowed,
        verified_allowed=settings.verified_allowed,
        patterns_allowed=settings.patterns_allowed,
    )
