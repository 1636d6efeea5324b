"""Records for organization migrations.

See: https://docs.github.com/en/rest/migrations/orgs
"""

from typing import Annotated

from pydantic import Field

from .base import GitHubResponse, timestamp_property
from .common import MinimalRepository, User
from .enums import MigrationState, strict_enum


class Migration(GitHubResponse):
    """An organization migration archive and its export progress.

    ``state`` is strict: a value outside ``MigrationState`` fails decoding
    instead of being silently dropped.
    """

    id: int = Field(default=0, description="Migration ID")
    node_id: str | None = Field(default=None, description="GraphQL node ID")
    guid: str | None = Field(default=None, description="Migration GUID")
    owner: User | None = Field(default=None, description="Organization that owns it")
    state: Annotated[MigrationState | None, strict_enum(MigrationState)] = Field(
        default=None, description="pending, exporting, exported or failed"
    )
    lock_repositories: bool = Field(default=False)
    exclude_metadata: bool = Field(default=False)
    exclude_git_data: bool = Field(default=False)
    exclude_attachments: bool = Field(default=False)
    exclude_releases: bool = Field(default=False)
    exclude_owner_projects: bool = Field(default=False)
    org_metadata_only: bool = Field(default=False)
    repositories: list[MinimalRepository] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list, description="Excluded item kinds")
    url: str | None = Field(default=None, description="API URL")
    archive_url: str | None = Field(default=None, description="Archive download URL")
    created_at: str | None = Field(default=None, description="Creation time (ISO-8601)")
    updated_at: str | None = Field(default=None, description="Last update (ISO-8601)")

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")

    @property
    def is_exported(self) -> bool:
        """Whether the archive is ready to download."""
        return self.state is MigrationState.EXPORTED
