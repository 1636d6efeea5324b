"""Tests for GitHubCheckRunsManager and GitHubCheckSuitesManager."""

import pytest

from github_manager.core import GitHubClientError
from github_manager.managers import GitHubCheckRunsManager, GitHubCheckSuitesManager
from github_manager.schemas import (
    AutoTriggerCheck,
    CheckConclusion,
    CheckRunFilter,
    CheckStatus,
)
from tests.conftest import sent_request
from tests.fixtures.github_responses import GITHUB_CHECK_RUN_RESPONSE, GITHUB_CHECK_SUITE_RESPONSE


class TestCheckRuns:
    """Check run writes return the run; lists accept filters."""

    @pytest.fixture
    def manager(self, requester) -> GitHubCheckRunsManager:
        return GitHubCheckRunsManager(requester=requester)

    def test_create(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(201, GITHUB_CHECK_RUN_RESPONSE)

        run = manager.create_check_run(
            "octocat",
            "hello-world",
            "mighty_readme",
            "ce587453ced02b1526dfb4cb910479d431683101",
            status=CheckStatus.COMPLETED,
            conclusion=CheckConclusion.NEUTRAL,
            output={"title": "Mighty Readme report", "summary": ""},
        )

        assert run.id == 4
        method, path, kwargs = sent_request(github_client)
        assert (method, path) == ("POST", "/repos/octocat/hello-world/check-runs")
        assert kwargs["json"] == {
            "name": "mighty_readme",
            "head_sha": "ce587453ced02b1526dfb4cb910479d431683101",
            "status": "completed",
            "conclusion": "neutral",
            "output": {"title": "Mighty Readme report", "summary": ""},
        }

    def test_update_sends_only_given_fields(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(200, GITHUB_CHECK_RUN_RESPONSE)

        manager.update_check_run("octocat", "hello-world", 4, status=CheckStatus.IN_PROGRESS)

        method, path, kwargs = sent_request(github_client)
        assert (method, path) == ("PATCH", "/repos/octocat/hello-world/check-runs/4")
        assert kwargs["json"] == {"status": "in_progress"}

    def test_create_failure_raises(self, manager, github_client, request_failed):
        github_client.request.side_effect = request_failed(422, {"message": "Validation Failed"})

        with pytest.raises(GitHubClientError):
            manager.create_check_run("octocat", "hello-world", "lint", "abc")

    def test_list_for_ref(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(
            200, {"total_count": 1, "check_runs": [GITHUB_CHECK_RUN_RESPONSE]}
        )

        runs = manager.list_check_runs_for_ref(
            "octocat", "hello-world", "main", status=CheckStatus.COMPLETED, filter=CheckRunFilter.LATEST
        )

        assert runs.total_count == 1
        _, path, kwargs = sent_request(github_client)
        assert path == "/repos/octocat/hello-world/commits/main/check-runs"
        assert kwargs["params"] == [("status", "completed"), ("filter", "latest")]

    def test_annotations(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(
            200, [{"path": "README.md", "annotation_level": "notice", "message": "ok"}]
        )

        annotations = manager.list_check_run_annotations("octocat", "hello-world", 4)

        assert [annotation.path for annotation in annotations] == ["README.md"]
        assert sent_request(github_client)[1] == "/repos/octocat/hello-world/check-runs/4/annotations"

    def test_rerequest(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(201)

        assert manager.rerequest_check_run("octocat", "hello-world", 4)


class TestCheckSuites:
    """Check suites and their auto-trigger preferences."""

    @pytest.fixture
    def manager(self, requester) -> GitHubCheckSuitesManager:
        return GitHubCheckSuitesManager(requester=requester)

    def test_create(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(201, GITHUB_CHECK_SUITE_RESPONSE)

        suite = manager.create_check_suite("octocat", "hello-world", "d6fde92930d4715a2b49857d24b940956b26d2d3")

        assert suite.id == 5
        assert sent_request(github_client)[2]["json"] == {
            "head_sha": "d6fde92930d4715a2b49857d24b940956b26d2d3"
        }

    def test_update_preferences(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(
            200,
            {
                "preferences": {"auto_trigger_checks": [{"app_id": 2, "setting": False}]},
                "repository": {"id": 1296269, "name": "Hello-World"},
            },
        )

        preferences = manager.update_preferences(
            "octocat", "hello-world", [AutoTriggerCheck(app_id=2, setting=False)]
        )

        assert preferences.repository is not None
        method, path, kwargs = sent_request(github_client)
        assert (method, path) == ("PATCH", "/repos/octocat/hello-world/check-suites/preferences")
        assert kwargs["json"] == {"auto_trigger_checks": [{"app_id": 2, "setting": False}]}

    def test_list_for_ref(self, manager, github_client, make_response):
        github_client.request.return_value = make_response(
            200, {"total_count": 1, "check_suites": [GITHUB_CHECK_SUITE_RESPONSE]}
        )

        suites = manager.list_check_suites_for_ref("octocat", "hello-world", "main", app_id=1)

        assert len(suites) == 1
        _, path, kwargs = sent_request(github_client)
        assert path == "/repos/octocat/hello-world/commits/main/check-suites"
        assert kwargs["params"] == [("app_id", "1")]

    def test_rerequest_failure(self, manager, github_client, request_failed):
        github_client.request.side_effect = request_failed(404, {"message": "Not Found"})

        result = manager.rerequest_check_suite("octocat", "hello-world", 5)

        assert not result
        assert result.status_code == 404
