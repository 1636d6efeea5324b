"""Tests for GitHubPermissionsManager."""

import pytest

from github_manager.managers import GitHubPermissionsManager
from github_manager.schemas import (
    AccessLevel,
    AllowedActions,
    AllowedActionsSettings,
    EnabledItems,
    WorkflowPermissions,
)
from tests.conftest import sent_request


@pytest.fixture
def manager(requester) -> GitHubPermissionsManager:
    return GitHubPermissionsManager(requester=requester)


class TestOrganization:
    """Organization-level Actions policy."""

    def test_get(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(
            200, {"enabled_repositories": "all", "allowed_actions": "selected"}
        )

        permissions = manager.get_organization_permissions("octo-org")

        assert permissions.enabled_repositories is EnabledItems.ALL
        assert permissions.allowed_actions is AllowedActions.SELECTED
        assert sent_request(github_client)[1] == "/orgs/octo-org/actions/permissions"

    def test_set_omits_unset_fields(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(204)

        assert manager.set_organization_permissions("octo-org", EnabledItems.SELECTED)

        method, _, kwargs = sent_request(github_client)
        assert method == "PUT"
        assert kwargs["json"] == {"enabled_repositories": "selected"}

    def test_enable_repository(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(204)

        assert manager.enable_repository("octo-org", 1296269)
        assert sent_request(github_client)[1] == (
            "/orgs/octo-org/actions/permissions/repositories/1296269"
        )

    def test_allowed_actions(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(204)
        settings = AllowedActionsSettings(
            github_owned_allowed=True, verified_allowed=False, patterns_allowed=["monalisa/*"]
        )

        manager.set_organization_allowed_actions("octo-org", settings)

        _, path, kwargs = sent_request(github_client)
        assert path == "/orgs/octo-org/actions/permissions/selected-actions"
        assert kwargs["json"] == {
            "github_owned_allowed": True,
            "verified_allowed": False,
            "patterns_allowed": ["monalisa/*"],
        }

    def test_workflow_permissions(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(
            200, {"default_workflow_permissions": "read", "can_approve_pull_request_reviews": True}
        )

        permissions = manager.get_organization_workflow_permissions("octo-org")

        assert permissions.default_workflow_permissions is WorkflowPermissions.READ
        assert permissions.can_approve_pull_request_reviews is True


class TestRepository:
    """Repository-level Actions policy."""

    def test_get(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(
            200, {"enabled": True, "allowed_actions": "local_only"}
        )

        permissions = manager.get_repository_permissions("octocat", "hello-world")

        assert permissions.enabled is True
        assert permissions.allowed_actions is AllowedActions.LOCAL_ONLY

    def test_set(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(204)

        manager.set_repository_permissions("octocat", "hello-world", False)

        assert sent_request(github_client)[2]["json"] == {"enabled": False}

    def test_workflow_access(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(204)

        assert manager.set_workflow_access("octocat", "hello-world", AccessLevel.ORGANIZATION)

        _, path, kwargs = sent_request(github_client)
        assert path == "/repos/octocat/hello-world/actions/permissions/access"
        assert kwargs["json"] == {"access_level": "organization"}

    def test_set_workflow_permissions_failure(self, manager, github_client, request_failed):
        github_client.request.side_effect = request_failed(409, {"message": "Conflict"})

        result = manager.set_repository_workflow_permissions(
            "octocat", "hello-world", default_workflow_permissions=WorkflowPermissions.WRITE
        )

        assert not result
        assert result.json_error_response == {"message": "Conflict"}
