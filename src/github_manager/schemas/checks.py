"""Records for check runs and check suites.

See: https://docs.github.com/en/rest/checks
"""

from typing import Annotated, ClassVar

from pydantic import Field

from .base import GitHubList, GitHubModel, GitHubResponse, timestamp_property
from .common import GitHubApp, MinimalPullRequest, MinimalRepository
from .enums import AnnotationLevel, CheckConclusion, CheckStatus, lenient_enum, strict_enum

StatusField = Annotated[CheckStatus | None, strict_enum(CheckStatus)]
ConclusionField = Annotated[CheckConclusion | None, lenient_enum(CheckConclusion)]


class CheckRunOutput(GitHubModel):
    """Summary text a check run reports."""

    title: str | None = Field(default=None)
    summary: str | None = Field(default=None)
    text: str | None = Field(default=None)
    annotations_count: int = Field(default=0)
    annotations_url: str | None = Field(default=None)


class CheckSuiteReference(GitHubModel):
    """Suite stub embedded in a check run."""

    id: int = Field(default=0, description="Check suite ID")


class CheckRun(GitHubResponse):
    """A single check reported against a commit."""

    id: int = Field(default=0, description="Check run ID")
    node_id: str | None = Field(default=None, description="GraphQL node ID")
    name: str | None = Field(default=None, description="Check name")
    head_sha: str | None = Field(default=None, description="Commit SHA being checked")
    external_id: str | None = Field(default=None, description="Integrator's reference")
    url: str | None = Field(default=None, description="API URL")
    html_url: str | None = Field(default=None, description="Web URL")
    details_url: str | None = Field(default=None, description="Integrator's details URL")
    status: StatusField = Field(default=None, description="queued, in_progress or completed")
    conclusion: ConclusionField = Field(default=None, description="Final conclusion")
    started_at: str | None = Field(default=None, description="Start time (ISO-8601)")
    completed_at: str | None = Field(default=None, description="Completion time (ISO-8601)")
    output: CheckRunOutput | None = Field(default=None)
    check_suite: CheckSuiteReference | None = Field(default=None)
    app: GitHubApp | None = Field(default=None, description="App that created the run")
    pull_requests: list[MinimalPullRequest] = Field(default_factory=list)

    started_at_timestamp = timestamp_property("started_at")
    completed_at_timestamp = timestamp_property("completed_at")


class CheckRunsList(GitHubList):
    """Maps to: GET .../check-suites/{id}/check-runs and .../commits/{ref}/check-runs"""

    items_key: ClassVar[str] = "check_runs"

    check_runs: list[CheckRun] = Field(default_factory=list)


class CheckRunAnnotation(GitHubModel):
    """A line-level annotation attached to a check run."""

    path: str | None = Field(default=None, description="File path")
    start_line: int = Field(default=0)
    end_line: int = Field(default=0)
    start_column: int = Field(default=0)
    end_column: int = Field(default=0)
    annotation_level: Annotated[AnnotationLevel | None, lenient_enum(AnnotationLevel)] = Field(
        default=None, description="notice, warning or failure"
    )
    title: str | None = Field(default=None)
    message: str | None = Field(default=None)
    raw_details: str | None = Field(default=None)
    blob_href: str | None = Field(default=None)


class CommitAuthor(GitHubModel):
    """Git author/committer of a head commit."""

    name: str | None = Field(default=None)
    email: str | None = Field(default=None)


class HeadCommit(GitHubModel):
    """Commit a check suite was created for."""

    id: str | None = Field(default=None, description="Commit SHA")
    tree_id: str | None = Field(default=None)
    message: str | None = Field(default=None)
    timestamp: str | None = Field(default=None, description="Commit time (ISO-8601)")
    author: CommitAuthor | None = Field(default=None)
    committer: CommitAuthor | None = Field(default=None)


class CheckSuite(GitHubResponse):
    """A group of check runs for one commit and one app."""

    id: int = Field(default=0, description="Check suite ID")
    node_id: str | None = Field(default=None, description="GraphQL node ID")
    head_branch: str | None = Field(default=None)
    head_sha: str | None = Field(default=None)
    status: StatusField = Field(default=None, description="queued, in_progress or completed")
    conclusion: ConclusionField = Field(default=None, description="Final conclusion")
    url: str | None = Field(default=None, description="API URL")
    before: str | None = Field(default=None, description="SHA before the push")
    after: str | None = Field(default=None, description="SHA after the push")
    check_runs_url: str | None = Field(default=None)
    latest_check_runs_count: int = Field(default=0)
    rerequestable: bool = Field(default=False)
    runs_rerequestable: bool = Field(default=False)
    app: GitHubApp | None = Field(default=None)
    repository: MinimalRepository | None = Field(default=None)
    head_commit: HeadCommit | None = Field(default=None)
    pull_requests: list[MinimalPullRequest] = Field(default_factory=list)
    created_at: str | None = Field(default=None, description="Creation time (ISO-8601)")
    updated_at: str | None = Field(default=None, description="Last update (ISO-8601)")

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")


class CheckSuitesList(GitHubList):
    """Maps to: GET /repos/{owner}/{repo}/commits/{ref}/check-suites"""

    items_key: ClassVar[str] = "check_suites"

    check_suites: list[CheckSuite] = Field(default_factory=list)


class AutoTriggerCheck(GitHubModel):
    """Whether one app's suites are created automatically on push."""

    app_id: int = Field(default=0)
    setting: bool = Field(default=False)


class CheckSuitePreferenceSettings(GitHubModel):
    auto_trigger_checks: list[AutoTriggerCheck] = Field(default_factory=list)


class CheckSuitesPreferences(GitHubResponse):
    """Maps to: PATCH /repos/{owner}/{repo}/check-suites/preferences"""

    preferences: CheckSuitePreferenceSettings | None = Field(default=None)
    repository: MinimalRepository | None = Field(default=None)
