"""Nested records shared across endpoint families.

These are the small building blocks GitHub embeds inside larger payloads
(an ``owner`` inside a repository, ``reactions`` inside a release, ...).
"""

from typing import Annotated, ClassVar

from pydantic import Field

from .base import GitHubList, GitHubModel, timestamp_property
from .enums import RepoVisibility, lenient_enum


class User(GitHubModel):
    """GitHub user (or organization) summary."""

    login: str | None = Field(default=None, description="GitHub username")
    id: int = Field(default=0, description="GitHub user ID")
    node_id: str | None = Field(default=None, description="GraphQL node ID")
    avatar_url: str | None = Field(default=None, description="Avatar image URL")
    url: str | None = Field(default=None, description="API URL")
    html_url: str | None = Field(default=None, description="Profile URL")
    type: str | None = Field(default=None, description="User type (User, Organization, Bot)")
    site_admin: bool = Field(default=False, description="Whether the user is a site admin")


class MinimalRepository(GitHubModel):
    """Repository summary as embedded in other payloads."""

    id: int = Field(default=0, description="Repository ID")
    node_id: str | None = Field(default=None, description="GraphQL node ID")
    name: str | None = Field(default=None, description="Repository name")
    full_name: str | None = Field(default=None, description="owner/name")
    owner: User | None = Field(default=None, description="Repository owner")
    private: bool = Field(default=False, description="Whether the repository is private")
    visibility: Annotated[RepoVisibility | None, lenient_enum(RepoVisibility)] = Field(
        default=None, description="public, private or internal"
    )
    description: str | None = Field(default=None, description="Repository description")
    fork: bool = Field(default=False, description="Whether the repository is a fork")
    archived: bool = Field(default=False, description="Whether the repository is archived")
    default_branch: str | None = Field(default=None, description="Default branch name")
    url: str | None = Field(default=None, description="API URL")
    html_url: str | None = Field(default=None, description="Web URL")
    created_at: str | None = Field(default=None, description="Creation time (ISO-8601)")
    updated_at: str | None = Field(default=None, description="Last update (ISO-8601)")
    pushed_at: str | None = Field(default=None, description="Last push (ISO-8601)")

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")
    pushed_at_timestamp = timestamp_property("pushed_at")


class GitHubApp(GitHubModel):
    """GitHub App that owns a check run or suite."""

    id: int = Field(default=0, description="App ID")
    slug: str | None = Field(default=None, description="URL-friendly app name")
    node_id: str | None = Field(default=None, description="GraphQL node ID")
    owner: User | None = Field(default=None, description="App owner")
    name: str | None = Field(default=None, description="App name")
    description: str | None = Field(default=None, description="App description")
    external_url: str | None = Field(default=None, description="App homepage")
    html_url: str | None = Field(default=None, description="App page on GitHub")
    events: list[str] = Field(default_factory=list, description="Subscribed events")
    created_at: str | None = Field(default=None, description="Creation time (ISO-8601)")
    updated_at: str | None = Field(default=None, description="Last update (ISO-8601)")

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")


class RepositoryReference(GitHubModel):
    """The ``repo`` stub inside a pull request head/base."""

    id: int = Field(default=0, description="Repository ID")
    url: str | None = Field(default=None, description="API URL")
    name: str | None = Field(default=None, description="Repository name")


class PullRequestReference(GitHubModel):
    """Head or base of a minimal pull request."""

    ref: str | None = Field(default=None, description="Branch name")
    sha: str | None = Field(default=None, description="Commit SHA")
    repo: RepositoryReference | None = Field(default=None, description="Repository")


class MinimalPullRequest(GitHubModel):
    """Pull request stub attached to check runs, suites and workflow runs."""

    id: int = Field(default=0, description="Pull request ID")
    number: int = Field(default=0, description="Pull request number")
    url: str | None = Field(default=None, description="API URL")
    head: PullRequestReference | None = Field(default=None, description="Head ref")
    base: PullRequestReference | None = Field(default=None, description="Base ref")


class Reactions(GitHubModel):
    """Reaction rollup embedded in releases, issues and comments."""

    url: str | None = Field(default=None, description="Reactions API URL")
    total_count: int = Field(default=0, description="Total reactions")
    plus_one: int = Field(default=0, alias="+1", description="Thumbs up")
    minus_one: int = Field(default=0, alias="-1", description="Thumbs down")
    laugh: int = Field(default=0)
    confused: int = Field(default=0)
    heart: int = Field(default=0)
    hooray: int = Field(default=0)
    eyes: int = Field(default=0)
    rocket: int = Field(default=0)


class RepositoriesList(GitHubList):
    """Paged list of repositories (selected repositories, migration repositories)."""

    items_key: ClassVar[str] = "repositories"

    repositories: list[MinimalRepository] = Field(default_factory=list)
