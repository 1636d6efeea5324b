"""Records for self-hosted runners.

See: https://docs.github.com/en/rest/actions/self-hosted-runners
"""

from typing import Annotated, ClassVar

from pydantic import Field

from .base import GitHubList, GitHubModel, GitHubResponse, timestamp_property
from .enums import RunnerLabelType, lenient_enum


class RunnerLabel(GitHubModel):
    """Label attached to a runner."""

    id: int = Field(default=0, description="Label ID")
    name: str | None = Field(default=None, description="Label name")
    type: Annotated[RunnerLabelType, lenient_enum(RunnerLabelType, RunnerLabelType.READ_ONLY)] = (
        Field(default=RunnerLabelType.READ_ONLY, description="read-only or custom")
    )


class Runner(GitHubResponse):
    """A self-hosted runner."""

    id: int = Field(default=0, description="Runner ID")
    name: str | None = Field(default=None, description="Runner name")
    os: str | None = Field(default=None, description="Operating system")
    status: str | None = Field(default=None, description="online or offline")
    busy: bool = Field(default=False, description="Whether the runner is executing a job")
    labels: list[RunnerLabel] = Field(default_factory=list, description="Runner labels")


class RunnersList(GitHubList):
    """Maps to: GET .../actions/runners"""

    items_key: ClassVar[str] = "runners"

    runners: list[Runner] = Field(default_factory=list)


class RunnerLabelsList(GitHubList):
    """Maps to: GET/POST/PUT/DELETE .../actions/runners/{runner_id}/labels"""

    items_key: ClassVar[str] = "labels"

    labels: list[RunnerLabel] = Field(default_factory=list)

    @property
    def names(self) -> list[str]:
        """Label names, in response order."""
        return [label.name for label in self.labels if label.name is not None]


class RunnerApplication(GitHubModel):
    """Downloadable runner build for one OS/architecture."""

    os: str | None = Field(default=None, description="Target operating system")
    architecture: str | None = Field(default=None, description="Target architecture")
    download_url: str | None = Field(default=None, description="Archive URL")
    filename: str | None = Field(default=None, description="Archive file name")
    temp_download_token: str | None = Field(default=None, description="Download token")
    sha256_checksum: str | None = Field(default=None, description="Archive checksum")


class RunnerToken(GitHubResponse):
    """Registration or remove token for configuring a runner."""

    token: str | None = Field(default=None, description="Token value")
    expires_at: str | None = Field(default=None, description="Expiry time (ISO-8601)")

    expires_at_timestamp = timestamp_property("expires_at")
