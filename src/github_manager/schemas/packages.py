"""Records for GitHub Packages.

See: https://docs.github.com/en/rest/packages
"""

from typing import Annotated

from pydantic import Field

from .base import GitHubModel, GitHubResponse, timestamp_property
from .common import MinimalRepository, User
from .enums import PackageType, RepoVisibility, lenient_enum, strict_enum

PackageTypeField = Annotated[PackageType | None, strict_enum(PackageType)]


class Package(GitHubResponse):
    """A package published to one of GitHub's registries."""

    id: int = Field(default=0, description="Package ID")
    name: str | None = Field(default=None, description="Package name")
    package_type: PackageTypeField = Field(default=None, description="Registry type")
    owner: User | None = Field(default=None)
    version_count: int = Field(default=0, description="Number of versions")
    visibility: Annotated[RepoVisibility | None, lenient_enum(RepoVisibility)] = Field(
        default=None, description="public, private or internal"
    )
    url: str | None = Field(default=None, description="API URL")
    html_url: str | None = Field(default=None, description="Web URL")
    repository: MinimalRepository | None = Field(default=None, description="Linked repository")
    created_at: str | None = Field(default=None, description="Creation time (ISO-8601)")
    updated_at: str | None = Field(default=None, description="Last update (ISO-8601)")

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")


class ContainerMetadata(GitHubModel):
    tags: list[str] = Field(default_factory=list)


class DockerMetadata(GitHubModel):
    tag: list[str] = Field(default_factory=list)


class PackageVersionMetadata(GitHubModel):
    """Registry-specific details of a package version."""

    package_type: PackageTypeField = Field(default=None)
    container: ContainerMetadata | None = Field(default=None)
    docker: DockerMetadata | None = Field(default=None)


class PackageVersion(GitHubResponse):
    """One published version of a package."""

    id: int = Field(default=0, description="Version ID")
    name: str | None = Field(default=None, description="Version name")
    url: str | None = Field(default=None, description="API URL")
    package_html_url: str | None = Field(default=None)
    html_url: str | None = Field(default=None)
    license: str | None = Field(default=None)
    description: str | None = Field(default=None)
    metadata: PackageVersionMetadata | None = Field(default=None)
    created_at: str | None = Field(default=None, description="Creation time (ISO-8601)")
    updated_at: str | None = Field(default=None, description="Last update (ISO-8601)")
    deleted_at: str | None = Field(default=None, description="Deletion time (ISO-8601)")

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")
    deleted_at_timestamp = timestamp_property("deleted_at")
