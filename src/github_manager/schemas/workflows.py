"""Records for workflows, workflow runs and their billing usage.

See: https://docs.github.com/en/rest/actions/workflows
"""

from typing import Annotated, Any, ClassVar

from pydantic import Field, field_validator

from .base import GitHubList, GitHubModel, GitHubResponse, timestamp_property
from .common import MinimalPullRequest, MinimalRepository, User
from .enums import WorkflowRunStatus, WorkflowState, lenient_enum

RunStatusField = Annotated[WorkflowRunStatus | None, lenient_enum(WorkflowRunStatus)]


class Workflow(GitHubResponse):
    """A workflow file registered in a repository."""

    id: int = Field(default=0, description="Workflow ID")
    node_id: str | None = Field(default=None, description="GraphQL node ID")
    name: str | None = Field(default=None, description="Workflow name")
    path: str | None = Field(default=None, description="Path of the workflow file")
    state: Annotated[WorkflowState | None, lenient_enum(WorkflowState)] = Field(
        default=None, description="Lifecycle state"
    )
    url: str | None = Field(default=None, description="API URL")
    html_url: str | None = Field(default=None, description="Web URL")
    badge_url: str | None = Field(default=None, description="Status badge URL")
    created_at: str | None = Field(default=None, description="Creation time (ISO-8601)")
    updated_at: str | None = Field(default=None, description="Last update (ISO-8601)")

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")


class WorkflowsList(GitHubList):
    """Maps to: GET /repos/{owner}/{repo}/actions/workflows"""

    items_key: ClassVar[str] = "workflows"

    workflows: list[Workflow] = Field(default_factory=list)


class Billable(GitHubModel):
    """Billable time on one runner platform (UBUNTU, MACOS, WINDOWS)."""

    name: str | None = Field(default=None, description="Platform key from the payload")
    total_ms: int = Field(default=0, description="Billable milliseconds")
    jobs: int = Field(default=0, description="Number of billed jobs (runs only)")


class WorkflowUsage(GitHubResponse):
    """Billable minutes of a workflow or run, per runner platform.

    GitHub keys the ``billable`` object by platform name; each entry is
    decoded into a ``Billable`` whose ``name`` is that key.
    """

    billable: dict[str, Billable] = Field(default_factory=dict)
    run_duration_ms: int = Field(default=0, description="Run duration (runs only)")

    @field_validator("billable", mode="before")
    @classmethod
    def _name_platforms(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {
            key: {**entry, "name": key}
            for key, entry in value.items()
            if isinstance(entry, dict)
        }

    @property
    def billables(self) -> list[Billable]:
        """Platforms in payload order."""
        return list(self.billable.values())

    @property
    def total_ms(self) -> int:
        """Billable milliseconds summed over all platforms."""
        return sum(item.total_ms for item in self.billable.values())


class WorkflowRun(GitHubResponse):
    """One execution of a workflow."""

    id: int = Field(default=0, description="Run ID")
    node_id: str | None = Field(default=None, description="GraphQL node ID")
    name: str | None = Field(default=None, description="Workflow name")
    workflow_id: int = Field(default=0, description="Workflow ID")
    check_suite_id: int = Field(default=0, description="Backing check suite ID")
    head_branch: str | None = Field(default=None, description="Branch the run was triggered on")
    head_sha: str | None = Field(default=None, description="Commit SHA")
    path: str | None = Field(default=None, description="Workflow file path")
    run_number: int = Field(default=0, description="Run number within the workflow")
    run_attempt: int = Field(default=0, description="Attempt number")
    event: str | None = Field(default=None, description="Triggering event")
    display_title: str | None = Field(default=None, description="Title shown in the UI")
    status: RunStatusField = Field(default=None, description="Run status")
    conclusion: RunStatusField = Field(default=None, description="Run conclusion")
    url: str | None = Field(default=None, description="API URL")
    html_url: str | None = Field(default=None, description="Web URL")
    jobs_url: str | None = Field(default=None, description="Jobs API URL")
    logs_url: str | None = Field(default=None, description="Logs archive URL")
    actor: User | None = Field(default=None, description="User who triggered the run")
    triggering_actor: User | None = Field(default=None, description="User who (re)started it")
    pull_requests: list[MinimalPullRequest] = Field(default_factory=list)
    repository: MinimalRepository | None = Field(default=None)
    head_repository: MinimalRepository | None = Field(default=None)
    created_at: str | None = Field(default=None, description="Creation time (ISO-8601)")
    updated_at: str | None = Field(default=None, description="Last update (ISO-8601)")
    run_started_at: str | None = Field(default=None, description="Start time (ISO-8601)")

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")
    run_started_at_timestamp = timestamp_property("run_started_at")


class WorkflowRunsList(GitHubList):
    """Maps to: GET .../actions/runs and .../workflows/{workflow_id}/runs"""

    items_key: ClassVar[str] = "workflow_runs"

    workflow_runs: list[WorkflowRun] = Field(default_factory=list)
