"""Workflows and workflow runs.

See: https://docs.github.com/en/rest/actions/workflows
     https://docs.github.com/en/rest/actions/workflow-runs
"""

from collections.abc import Mapping
from typing import Any

from github_manager.core import paths
from github_manager.core.manager import GitHubManager
from github_manager.core.params import Params
from github_manager.core.paths import ACTIONS, RUNS, WORKFLOWS
from github_manager.core.results import ReturnFormat, WriteResult
from github_manager.schemas import (
    Workflow,
    WorkflowRun,
    WorkflowRunsList,
    WorkflowRunStatus,
    WorkflowsList,
    WorkflowUsage,
)

TIMING = "timing"


class GitHubWorkflowsManager(GitHubManager):
    """Inspect, toggle and trigger workflows; list and control their runs.

    ``workflow_id`` accepts the numeric ID or the workflow file name
    (e.g. ``"ci.yml"``). Every read takes ``fmt`` to return parsed JSON or
    the raw body instead of the typed record.
    """

    # -------------------------------------------------------------------------
    # Workflows
    # -------------------------------------------------------------------------
    def list_workflows(
        self,
        owner: str,
        repo: str,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WorkflowsList | Any:
        """GET /repos/{owner}/{repo}/actions/workflows"""
        return self.fetch_as(
            paths.repo(owner, repo, ACTIONS, WORKFLOWS), WorkflowsList, fmt, params
        )

    def get_workflow(
        self,
        owner: str,
        repo: str,
        workflow_id: int | str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Workflow | Any:
        """GET /repos/{owner}/{repo}/actions/workflows/{workflow_id}"""
        return self.fetch_as(
            paths.repo(owner, repo, ACTIONS, WORKFLOWS, workflow_id), Workflow, fmt
        )

    def disable_workflow(self, owner: str, repo: str, workflow_id: int | str) -> WriteResult:
        """PUT /repos/{owner}/{repo}/actions/workflows/{workflow_id}/disable"""
        return self._write("PUT", paths.repo(owner, repo, ACTIONS, WORKFLOWS, workflow_id, "disable"))

    def enable_workflow(self, owner: str, repo: str, workflow_id: int | str) -> WriteResult:
        """PUT /repos/{owner}/{repo}/actions/workflows/{workflow_id}/enable"""
        return self._write("PUT", paths.repo(owner, repo, ACTIONS, WORKFLOWS, workflow_id, "enable"))

    def create_workflow_dispatch(
        self,
        owner: str,
        repo: str,
        workflow_id: int | str,
        ref: str,
        inputs: Mapping[str, Any] | None = None,
    ) -> WriteResult:
        """
        POST /repos/{owner}/{repo}/actions/workflows/{workflow_id}/dispatches

        Args:
            owner: Repository owner
            repo: Repository name
            workflow_id: Workflow ID or file name
            ref: Branch or tag to run on
            inputs: ``workflow_dispatch`` inputs

        Returns:
            WriteResult, successful on 204
        """
        return self._write(
            "POST",
            paths.repo(owner, repo, ACTIONS, WORKFLOWS, workflow_id, "dispatches"),
            body=Params(ref=ref, inputs=dict(inputs) if inputs else None),
        )

    def get_workflow_usage(
        self,
        owner: str,
        repo: str,
        workflow_id: int | str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WorkflowUsage | Any:
        """GET /repos/{owner}/{repo}/actions/workflows/{workflow_id}/timing"""
        return self.fetch_as(
            paths.repo(owner, repo, ACTIONS, WORKFLOWS, workflow_id, TIMING), WorkflowUsage, fmt
        )

    # -------------------------------------------------------------------------
    # Runs
    # -------------------------------------------------------------------------
    def list_repository_workflow_runs(
        self,
        owner: str,
        repo: str,
        status: WorkflowRunStatus | None = None,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WorkflowRunsList | Any:
        """GET /repos/{owner}/{repo}/actions/runs"""
        return self.fetch_as(
            paths.repo(owner, repo, ACTIONS, RUNS),
            WorkflowRunsList,
            fmt,
            Params.of(params, status=status),
        )

    def list_workflow_runs(
        self,
        owner: str,
        repo: str,
        workflow_id: int | str,
        status: WorkflowRunStatus | None = None,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WorkflowRunsList | Any:
        """GET /repos/{owner}/{repo}/actions/workflows/{workflow_id}/runs"""
        return self.fetch_as(
            paths.repo(owner, repo, ACTIONS, WORKFLOWS, workflow_id, RUNS),
            WorkflowRunsList,
            fmt,
            Params.of(params, status=status),
        )

    def get_workflow_run(
        self,
        owner: str,
        repo: str,
        run_id: int,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WorkflowRun | Any:
        """GET /repos/{owner}/{repo}/actions/runs/{run_id}"""
        return self.fetch_as(paths.repo(owner, repo, ACTIONS, RUNS, run_id), WorkflowRun, fmt)

    def get_workflow_run_usage(
        self,
        owner: str,
        repo: str,
        run_id: int,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WorkflowUsage | Any:
        """GET /repos/{owner}/{repo}/actions/runs/{run_id}/timing"""
        return self.fetch_as(
            paths.repo(owner, repo, ACTIONS, RUNS, run_id, TIMING), WorkflowUsage, fmt
        )

    def cancel_workflow_run(self, owner: str, repo: str, run_id: int) -> WriteResult:
        """POST /repos/{owner}/{repo}/actions/runs/{run_id}/cancel (202 Accepted)"""
        return self._write(
            "POST", paths.repo(owner, repo, ACTIONS, RUNS, run_id, "cancel"), expected=(202,)
        )

    def rerun_workflow_run(self, owner: str, repo: str, run_id: int) -> WriteResult:
        """POST /repos/{owner}/{repo}/actions/runs/{run_id}/rerun (201 Created)"""
        return self._write(
            "POST", paths.repo(owner, repo, ACTIONS, RUNS, run_id, "rerun"), expected=(201,)
        )

    def delete_workflow_run(self, owner: str, repo: str, run_id: int) -> WriteResult:
        """DELETE /repos/{owner}/{repo}/actions/runs/{run_id}"""
        return self._write("DELETE", paths.repo(owner, repo, ACTIONS, RUNS, run_id))
