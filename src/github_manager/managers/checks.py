"""Check runs and check suites.

See: https://docs.github.com/en/rest/checks
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from github_manager.core import paths
from github_manager.core.manager import GitHubManager
from github_manager.core.params import Params
from github_manager.core.paths import CHECK_RUNS, CHECK_SUITES, COMMITS
from github_manager.core.results import ReturnFormat, WriteResult
from github_manager.schemas import (
    AutoTriggerCheck,
    CheckConclusion,
    CheckRun,
    CheckRunAnnotation,
    CheckRunFilter,
    CheckRunsList,
    CheckStatus,
    CheckSuite,
    CheckSuitesList,
    CheckSuitesPreferences,
)

RE_REQUESTED = (201,)


class GitHubCheckRunsManager(GitHubManager):
    """Create, update and query check runs."""

    def create_check_run(
        self,
        owner: str,
        repo: str,
        name: str,
        head_sha: str,
        *,
        details_url: str | None = None,
        external_id: str | None = None,
        status: CheckStatus | None = None,
        started_at: str | None = None,
        conclusion: CheckConclusion | None = None,
        completed_at: str | None = None,
        output: Mapping[str, Any] | None = None,
        actions: Sequence[Mapping[str, Any]] | None = None,
    ) -> CheckRun:
        """
        POST /repos/{owner}/{repo}/check-runs

        Args:
            owner: Repository owner
            repo: Repository name
            name: Check name
            head_sha: Commit SHA to report on
            details_url: Integrator's details page
            external_id: Integrator's reference
            status: Initial status
            started_at: Start time (ISO-8601)
            conclusion: Required when ``status`` is completed
            completed_at: Completion time (ISO-8601)
            output: ``title``/``summary``/``text``/``annotations`` object
            actions: Buttons shown on the check run

        Returns:
            The created CheckRun
        """
        body = Params(
            name=name,
            head_sha=head_sha,
            details_url=details_url,
            external_id=external_id,
            status=status,
            started_at=started_at,
            conclusion=conclusion,
            completed_at=completed_at,
            output=output,
            actions=actions,
        )
        return self._send_typed("POST", paths.repo(owner, repo, CHECK_RUNS), CheckRun, body=body)

    def update_check_run(
        self,
        owner: str,
        repo: str,
        check_run_id: int,
        *,
        name: str | None = None,
        details_url: str | None = None,
        external_id: str | None = None,
        status: CheckStatus | None = None,
        started_at: str | None = None,
        conclusion: CheckConclusion | None = None,
        completed_at: str | None = None,
        output: Mapping[str, Any] | None = None,
        actions: Sequence[Mapping[str, Any]] | None = None,
    ) -> CheckRun:
        """PATCH /repos/{owner}/{repo}/check-runs/{check_run_id} (only given fields change)"""
        body = Params(
            name=name,
            details_url=details_url,
            external_id=external_id,
            status=status,
            started_at=started_at,
            conclusion=conclusion,
            completed_at=completed_at,
            output=output,
            actions=actions,
        )
        return self._send_typed(
            "PATCH", paths.repo(owner, repo, CHECK_RUNS, check_run_id), CheckRun, body=body
        )

    def get_check_run(
        self,
        owner: str,
        repo: str,
        check_run_id: int,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> CheckRun | Any:
        """GET /repos/{owner}/{repo}/check-runs/{check_run_id}"""
        return self.fetch_as(paths.repo(owner, repo, CHECK_RUNS, check_run_id), CheckRun, fmt)

    def list_check_run_annotations(
        self,
        owner: str,
        repo: str,
        check_run_id: int,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[CheckRunAnnotation] | Any:
        """GET /repos/{owner}/{repo}/check-runs/{check_run_id}/annotations"""
        return self.fetch_as(
            paths.repo(owner, repo, CHECK_RUNS, check_run_id, "annotations"),
            list[CheckRunAnnotation],
            fmt,
            params,
        )

    def rerequest_check_run(self, owner: str, repo: str, check_run_id: int) -> WriteResult:
        """POST /repos/{owner}/{repo}/check-runs/{check_run_id}/rerequest (201)"""
        return self._write(
            "POST",
            paths.repo(owner, repo, CHECK_RUNS, check_run_id, "rerequest"),
            expected=RE_REQUESTED,
        )

    def list_check_runs_in_suite(
        self,
        owner: str,
        repo: str,
        check_suite_id: int,
        check_name: str | None = None,
        status: CheckStatus | None = None,
        filter: CheckRunFilter | None = None,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> CheckRunsList | Any:
        """GET /repos/{owner}/{repo}/check-suites/{check_suite_id}/check-runs"""
        return self.fetch_as(
            paths.repo(owner, repo, CHECK_SUITES, check_suite_id, CHECK_RUNS),
            CheckRunsList,
            fmt,
            Params.of(params, check_name=check_name, status=status, filter=filter),
        )

    def list_check_runs_for_ref(
        self,
        owner: str,
        repo: str,
        ref: str,
        check_name: str | None = None,
        status: CheckStatus | None = None,
        filter: CheckRunFilter | None = None,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> CheckRunsList | Any:
        """GET /repos/{owner}/{repo}/commits/{ref}/check-runs"""
        return self.fetch_as(
            paths.repo(owner, repo, COMMITS, ref, CHECK_RUNS),
            CheckRunsList,
            fmt,
            Params.of(params, check_name=check_name, status=status, filter=filter),
        )


class GitHubCheckSuitesManager(GitHubManager):
    """Create, configure and query check suites."""

    def update_preferences(
        self,
        owner: str,
        repo: str,
        auto_trigger_checks: Iterable[AutoTriggerCheck],
    ) -> CheckSuitesPreferences:
        """PATCH /repos/{owner}/{repo}/check-suites/preferences"""
        body = {
            "auto_trigger_checks": [
                {"app_id": check.app_id, "setting": check.setting} for check in auto_trigger_checks
            ]
        }
        return self._send_typed(
            "PATCH",
            paths.repo(owner, repo, CHECK_SUITES, "preferences"),
            CheckSuitesPreferences,
            body=body,
        )

    def create_check_suite(self, owner: str, repo: str, head_sha: str) -> CheckSuite:
        """POST /repos/{owner}/{repo}/check-suites"""
        return self._send_typed(
            "POST", paths.repo(owner, repo, CHECK_SUITES), CheckSuite, body={"head_sha": head_sha}
        )

    def get_check_suite(
        self,
        owner: str,
        repo: str,
        check_suite_id: int,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> CheckSuite | Any:
        """GET /repos/{owner}/{repo}/check-suites/{check_suite_id}"""
        return self.fetch_as(
            paths.repo(owner, repo, CHECK_SUITES, check_suite_id), CheckSuite, fmt
        )

    def rerequest_check_suite(self, owner: str, repo: str, check_suite_id: int) -> WriteResult:
        """POST /repos/{owner}/{repo}/check-suites/{check_suite_id}/rerequest (201)"""
        return self._write(
            "POST",
            paths.repo(owner, repo, CHECK_SUITES, check_suite_id, "rerequest"),
            expected=RE_REQUESTED,
        )

    def list_check_suites_for_ref(
        self,
        owner: str,
        repo: str,
        ref: str,
        app_id: int | None = None,
        check_name: str | None = None,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> CheckSuitesList | Any:
        """GET /repos/{owner}/{repo}/commits/{ref}/check-suites"""
        return self.fetch_as(
            paths.repo(owner, repo, COMMITS, ref, CHECK_SUITES),
            CheckSuitesList,
            fmt,
            Params.of(params, app_id=app_id, check_name=check_name),
        )
