"""Organization migrations (export archives).

See: https://docs.github.com/en/rest/migrations/orgs
"""

from collections.abc import Iterable
from typing import Any

from github_manager.core import paths
from github_manager.core.manager import GitHubManager
from github_manager.core.params import Params
from github_manager.core.paths import MIGRATIONS, REPOS, REPOSITORIES
from github_manager.core.results import ReturnFormat, WriteResult
from github_manager.schemas import Migration, MinimalRepository


class GitHubMigrationsManager(GitHubManager):
    """Start organization exports and follow their progress.

    ``Migration.state`` is decoded strictly: an unrecognised state raises
    ``pydantic.ValidationError`` instead of being reported as unknown.
    """

    def list_organization_migrations(
        self,
        org: str,
        exclude: Iterable[str] | None = None,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Migration] | Any:
        """GET /orgs/{org}/migrations"""
        return self.fetch_as(
            paths.org(org, MIGRATIONS),
            list[Migration],
            fmt,
            Params.of(params, exclude=list(exclude) if exclude else None),
        )

    def start_organization_migration(
        self,
        org: str,
        repositories: Iterable[str],
        *,
        lock_repositories: bool | None = None,
        exclude_metadata: bool | None = None,
        exclude_git_data: bool | None = None,
        exclude_attachments: bool | None = None,
        exclude_releases: bool | None = None,
        exclude_owner_projects: bool | None = None,
        org_metadata_only: bool | None = None,
        exclude: Iterable[str] | None = None,
    ) -> Migration:
        """
        POST /orgs/{org}/migrations

        Args:
            org: Organization login
            repositories: Names of the repositories to export
            lock_repositories: Lock repositories while migrating
            exclude_metadata: Skip metadata (issues, pull requests, ...)
            exclude_git_data: Skip git history
            exclude_attachments: Skip attachments
            exclude_releases: Skip releases
            exclude_owner_projects: Skip projects owned by the org or users
            org_metadata_only: Export only organization metadata
            exclude: Related items to leave out (e.g. ``["repositories"]``)

        Returns:
            The Migration, usually in the ``pending`` state
        """
        body = Params(
            repositories=list(repositories),
            lock_repositories=lock_repositories,
            exclude_metadata=exclude_metadata,
            exclude_git_data=exclude_git_data,
            exclude_attachments=exclude_attachments,
            exclude_releases=exclude_releases,
            exclude_owner_projects=exclude_owner_projects,
            org_metadata_only=org_metadata_only,
            exclude=list(exclude) if exclude is not None else None,
        )
        return self._send_typed("POST", paths.org(org, MIGRATIONS), Migration, body=body)

    def get_organization_migration_status(
        self,
        org: str,
        migration_id: int,
        exclude: Iterable[str] | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Migration | Any:
        """GET /orgs/{org}/migrations/{migration_id}"""
        return self.fetch_as(
            paths.org(org, MIGRATIONS, migration_id),
            Migration,
            fmt,
            Params(exclude=list(exclude) if exclude else None),
        )

    def delete_organization_migration_archive(self, org: str, migration_id: int) -> WriteResult:
        """DELETE /orgs/{org}/migrations/{migration_id}/archive"""
        return self._write("DELETE", paths.org(org, MIGRATIONS, migration_id, "archive"))

    def unlock_organization_repository(
        self, org: str, migration_id: int, repo_name: str
    ) -> WriteResult:
        """DELETE /orgs/{org}/migrations/{migration_id}/repos/{repo_name}/lock"""
        return self._write(
            "DELETE", paths.org(org, MIGRATIONS, migration_id, REPOS, repo_name, "lock")
        )

    def list_migration_repositories(
        self,
        org: str,
        migration_id: int,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[MinimalRepository] | Any:
        """GET /orgs/{org}/migrations/{migration_id}/repositories"""
        return self.fetch_as(
            paths.org(org, MIGRATIONS, migration_id, REPOSITORIES),
            list[MinimalRepository],
            fmt,
            params,
        )
