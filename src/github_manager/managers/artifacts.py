"""Workflow artifacts.

See: https://docs.github.com/en/rest/actions/artifacts
"""

from typing import Any

from github_manager.core import paths
from github_manager.core.manager import GitHubManager
from github_manager.core.params import Params
from github_manager.core.paths import ACTIONS, ARTIFACTS, RUNS
from github_manager.core.results import ReturnFormat, WriteResult
from github_manager.schemas import Artifact, ArtifactsList


class GitHubArtifactsManager(GitHubManager):
    """List, inspect and delete artifacts produced by workflow runs."""

    def list_artifacts(
        self,
        owner: str,
        repo: str,
        name: str | None = None,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> ArtifactsList | Any:
        """GET /repos/{owner}/{repo}/actions/artifacts (optionally filtered by name)"""
        return self.fetch_as(
            paths.repo(owner, repo, ACTIONS, ARTIFACTS),
            ArtifactsList,
            fmt,
            Params.of(params, name=name),
        )

    def list_workflow_run_artifacts(
        self,
        owner: str,
        repo: str,
        run_id: int,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> ArtifactsList | Any:
        """GET /repos/{owner}/{repo}/actions/runs/{run_id}/artifacts"""
        return self.fetch_as(
            paths.repo(owner, repo, ACTIONS, RUNS, run_id, ARTIFACTS), ArtifactsList, fmt, params
        )

    def get_artifact(
        self,
        owner: str,
        repo: str,
        artifact_id: int,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Artifact | Any:
        """GET /repos/{owner}/{repo}/actions/artifacts/{artifact_id}"""
        return self.fetch_as(
            paths.repo(owner, repo, ACTIONS, ARTIFACTS, artifact_id), Artifact, fmt
        )

    def delete_artifact(self, owner: str, repo: str, artifact_id: int) -> WriteResult:
        """DELETE /repos/{owner}/{repo}/actions/artifacts/{artifact_id}"""
        return self._write("DELETE", paths.repo(owner, repo, ACTIONS, ARTIFACTS, artifact_id))
