"""Records for releases and release assets.

See: https://docs.github.com/en/rest/releases
"""

from typing import Annotated

from pydantic import Field

from .base import GitHubResponse, timestamp_property
from .common import Reactions, User
from .enums import AssetState, strict_enum


class ReleaseAsset(GitHubResponse):
    """A file attached to a release."""

    id: int = Field(default=0, description="Asset ID")
    node_id: str | None = Field(default=None, description="GraphQL node ID")
    name: str | None = Field(default=None, description="File name")
    label: str | None = Field(default=None, description="Display label")
    state: Annotated[AssetState | None, strict_enum(AssetState)] = Field(
        default=None, description="uploaded or open"
    )
    content_type: str | None = Field(default=None, description="MIME type")
    size: int = Field(default=0, description="Size in bytes")
    download_count: int = Field(default=0)
    url: str | None = Field(default=None, description="API URL")
    browser_download_url: str | None = Field(default=None)
    uploader: User | None = Field(default=None)
    created_at: str | None = Field(default=None, description="Creation time (ISO-8601)")
    updated_at: str | None = Field(default=None, description="Last update (ISO-8601)")

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")


class Release(GitHubResponse):
    """A published (or draft) release of a repository."""

    id: int = Field(default=0, description="Release ID")
    node_id: str | None = Field(default=None, description="GraphQL node ID")
    tag_name: str | None = Field(default=None, description="Git tag")
    target_commitish: str | None = Field(default=None, description="Branch or SHA tagged")
    name: str | None = Field(default=None, description="Release title")
    body: str | None = Field(default=None, description="Release notes (markdown)")
    draft: bool = Field(default=False)
    prerelease: bool = Field(default=False)
    author: User | None = Field(default=None)
    assets: list[ReleaseAsset] = Field(default_factory=list)
    reactions: Reactions | None = Field(default=None, description="Reaction rollup")
    url: str | None = Field(default=None, description="API URL")
    html_url: str | None = Field(default=None, description="Web URL")
    assets_url: str | None = Field(default=None)
    upload_url: str | None = Field(default=None)
    tarball_url: str | None = Field(default=None)
    zipball_url: str | None = Field(default=None)
    discussion_url: str | None = Field(default=None)
    created_at: str | None = Field(default=None, description="Creation time (ISO-8601)")
    published_at: str | None = Field(default=None, description="Publish time (ISO-8601)")

    created_at_timestamp = timestamp_property("created_at")
    published_at_timestamp = timestamp_property("published_at")


class ReleaseNotes(GitHubResponse):
    """Generated release name and notes.

    Maps to: POST /repos/{owner}/{repo}/releases/generate-notes
    """

    name: str | None = Field(default=None)
    body: str | None = Field(default=None)
