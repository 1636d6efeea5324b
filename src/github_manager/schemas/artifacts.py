"""Records for workflow artifacts.

See: https://docs.github.com/en/rest/actions/artifacts
"""

from typing import ClassVar

from pydantic import Field

from .base import GitHubList, GitHubModel, GitHubResponse, timestamp_property


class ArtifactWorkflowRun(GitHubModel):
    """The run that produced an artifact."""

    id: int = Field(default=0, description="Workflow run ID")
    repository_id: int = Field(default=0)
    head_repository_id: int = Field(default=0)
    head_branch: str | None = Field(default=None)
    head_sha: str | None = Field(default=None)


class Artifact(GitHubResponse):
    """A file archive uploaded by a workflow run."""

    id: int = Field(default=0, description="Artifact ID")
    node_id: str | None = Field(default=None, description="GraphQL node ID")
    name: str | None = Field(default=None, description="Artifact name")
    size_in_bytes: int = Field(default=0, description="Archive size")
    url: str | None = Field(default=None, description="API URL")
    archive_download_url: str | None = Field(default=None, description="Download URL")
    expired: bool = Field(default=False, description="Whether the artifact has expired")
    workflow_run: ArtifactWorkflowRun | None = Field(default=None)
    created_at: str | None = Field(default=None, description="Creation time (ISO-8601)")
    updated_at: str | None = Field(default=None, description="Last update (ISO-8601)")
    expires_at: str | None = Field(default=None, description="Expiry time (ISO-8601)")

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")
    expires_at_timestamp = timestamp_property("expires_at")


class ArtifactsList(GitHubList):
    """Maps to: GET .../actions/artifacts and .../runs/{run_id}/artifacts"""

    items_key: ClassVar[str] = "artifacts"

    artifacts: list[Artifact] = Field(default_factory=list)
