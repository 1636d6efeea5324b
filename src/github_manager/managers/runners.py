"""Self-hosted runners for organizations and repositories.

See: https://docs.github.com/en/rest/actions/self-hosted-runners
"""

from collections.abc import Iterable
from typing import Any

from github_manager.core import paths
from github_manager.core.manager import GitHubManager
from github_manager.core.params import Params
from github_manager.core.paths import ACTIONS, RUNNERS
from github_manager.core.results import ReturnFormat, WriteResult
from github_manager.schemas import (
    Runner,
    RunnerApplication,
    RunnerLabelsList,
    RunnersList,
    RunnerToken,
)

DOWNLOADS = "downloads"
REGISTRATION_TOKEN = "registration-token"
REMOVE_TOKEN = "remove-token"
LABELS = "labels"


def _org_runners(org: str, *parts: object) -> str:
    return paths.org(org, ACTIONS, RUNNERS, *parts)


def _repo_runners(owner: str, repo: str, *parts: object) -> str:
    return paths.repo(owner, repo, ACTIONS, RUNNERS, *parts)


class GitHubRunnersManager(GitHubManager):
    """Register, inspect, label and remove self-hosted runners.

    Registration/remove tokens and label edits return the resulting
    resource, so they raise on failure like reads do.
    """

    # -------------------------------------------------------------------------
    # Organization
    # -------------------------------------------------------------------------
    def list_organization_runner_applications(
        self, org: str, *, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> list[RunnerApplication] | Any:
        """GET /orgs/{org}/actions/runners/downloads"""
        return self.fetch_as(_org_runners(org, DOWNLOADS), list[RunnerApplication], fmt)

    def create_organization_registration_token(self, org: str) -> RunnerToken:
        """POST /orgs/{org}/actions/runners/registration-token"""
        return self._send_typed("POST", _org_runners(org, REGISTRATION_TOKEN), RunnerToken)

    def create_organization_remove_token(self, org: str) -> RunnerToken:
        """POST /orgs/{org}/actions/runners/remove-token"""
        return self._send_typed("POST", _org_runners(org, REMOVE_TOKEN), RunnerToken)

    def list_organization_runners(
        self,
        org: str,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> RunnersList | Any:
        """GET /orgs/{org}/actions/runners"""
        return self.fetch_as(_org_runners(org), RunnersList, fmt, params)

    def get_organization_runner(
        self, org: str, runner_id: int, *, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> Runner | Any:
        """GET /orgs/{org}/actions/runners/{runner_id}"""
        return self.fetch_as(_org_runners(org, runner_id), Runner, fmt)

    def delete_organization_runner(self, org: str, runner_id: int) -> WriteResult:
        """DELETE /orgs/{org}/actions/runners/{runner_id}"""
        return self._write("DELETE", _org_runners(org, runner_id))

    def list_organization_runner_labels(
        self, org: str, runner_id: int, *, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> RunnerLabelsList | Any:
        """GET /orgs/{org}/actions/runners/{runner_id}/labels"""
        return self.fetch_as(_org_runners(org, runner_id, LABELS), RunnerLabelsList, fmt)

    def add_organization_runner_labels(
        self, org: str, runner_id: int, labels: Iterable[str]
    ) -> RunnerLabelsList:
        """POST /orgs/{org}/actions/runners/{runner_id}/labels"""
        return self._send_typed(
            "POST",
            _org_runners(org, runner_id, LABELS),
            RunnerLabelsList,
            body={"labels": list(labels)},
        )

    def set_organization_runner_labels(
        self, org: str, runner_id: int, labels: Iterable[str]
    ) -> RunnerLabelsList:
        """PUT /orgs/{org}/actions/runners/{runner_id}/labels"""
        return self._send_typed(
            "PUT",
            _org_runners(org, runner_id, LABELS),
            RunnerLabelsList,
            body={"labels": list(labels)},
        )

    def remove_all_organization_runner_labels(
        self, org: str, runner_id: int
    ) -> RunnerLabelsList:
        """DELETE /orgs/{org}/actions/runners/{runner_id}/labels (read-only labels remain)"""
        return self._send_typed("DELETE", _org_runners(org, runner_id, LABELS), RunnerLabelsList)

    def remove_organization_runner_label(
        self, org: str, runner_id: int, name: str
    ) -> RunnerLabelsList:
        """DELETE /orgs/{org}/actions/runners/{runner_id}/labels/{name}"""
        return self._send_typed(
            "DELETE", _org_runners(org, runner_id, LABELS, name), RunnerLabelsList
        )

    # -------------------------------------------------------------------------
    # Repository
    # -------------------------------------------------------------------------
    def list_repository_runner_applications(
        self, owner: str, repo: str, *, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ) -> list[RunnerApplication] | Any:
        """GET /repos/{owner}/{repo}/actions/runners/downloads"""
        return self.fetch_as(
            _repo_runners(owner, repo, DOWNLOADS), list[RunnerApplication], fmt
        )

    def create_repository_registration_token(self, owner: str, repo: str) -> RunnerToken:
        """POST /repos/{owner}/{repo}/actions/runners/registration-token"""
        return self._send_typed(
            "POST", _repo_runners(owner, repo, REGISTRATION_TOKEN), RunnerToken
        )

    def create_repository_remove_token(self, owner: str, repo: str) -> RunnerToken:
        """POST /repos/{owner}/{repo}/actions/runners/remove-token"""
        return self._send_typed("POST", _repo_runners(owner, repo, REMOVE_TOKEN), RunnerToken)

    def list_repository_runners(
        self,
        owner: str,
        repo: str,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> RunnersList | Any:
        """GET /repos/{owner}/{repo}/actions/runners"""
        return self.fetch_as(_repo_runners(owner, repo), RunnersList, fmt, params)

    def get_repository_runner(
        self,
        owner: str,
        repo: str,
        runner_id: int,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Runner | Any:
        """GET /repos/{owner}/{repo}/actions/runners/{runner_id}"""
        return self.fetch_as(_repo_runners(owner, repo, runner_id), Runner, fmt)

    def delete_repository_runner(self, owner: str, repo: str, runner_id: int) -> WriteResult:
        """DELETE /repos/{owner}/{repo}/actions/runners/{runner_id}"""
        return self._write("DELETE", _repo_runners(owner, repo, runner_id))

    def list_repository_runner_labels(
        self,
        owner: str,
        repo: str,
        runner_id: int,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> RunnerLabelsList | Any:
        """GET /repos/{owner}/{repo}/actions/runners/{runner_id}/labels"""
        return self.fetch_as(
            _repo_runners(owner, repo, runner_id, LABELS), RunnerLabelsList, fmt
        )

    def add_repository_runner_labels(
        self, owner: str, repo: str, runner_id: int, labels: Iterable[str]
    ) -> RunnerLabelsList:
        """POST /repos/{owner}/{repo}/actions/runners/{runner_id}/labels"""
        return self._send_typed(
            "POST",
            _repo_runners(owner, repo, runner_id, LABELS),
            RunnerLabelsList,
            body={"labels": list(labels)},
        )

    def set_repository_runner_labels(
        self, owner: str, repo: str, runner_id: int, labels: Iterable[str]
    ) -> RunnerLabelsList:
        """PUT /repos/{owner}/{repo}/actions/runners/{runner_id}/labels"""
        return self._send_typed(
            "PUT",
            _repo_runners(owner, repo, runner_id, LABELS),
            RunnerLabelsList,
            body={"labels": list(labels)},
        )

    def remove_all_repository_runner_labels(
        self, owner: str, repo: str, runner_id: int
    ) -> RunnerLabelsList:
        """DELETE /repos/{owner}/{repo}/actions/runners/{runner_id}/labels"""
        return self._send_typed(
            "DELETE", _repo_runners(owner, repo, runner_id, LABELS), RunnerLabelsList
        )

    def remove_repository_runner_label(
        self, owner: str, repo: str, runner_id: int, name: str
    ) -> RunnerLabelsList:
        """DELETE /repos/{owner}/{repo}/actions/runners/{runner_id}/labels/{name}"""
        return self._send_typed(
            "DELETE", _repo_runners(owner, repo, runner_id, LABELS, name), RunnerLabelsList
        )
