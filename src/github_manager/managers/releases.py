"""Releases and release assets.

See: https://docs.github.com/en/rest/releases
"""

from typing import Any

from github_manager.core import paths
from github_manager.core.manager import GitHubManager
from github_manager.core.params import Params
from github_manager.core.paths import ASSETS, RELEASES
from github_manager.core.results import ReturnFormat, WriteResult
from github_manager.schemas import Release, ReleaseAsset, ReleaseNotes


class GitHubReleasesManager(GitHubManager):
    """Publish, edit and query releases and their uploaded assets."""

    def list_releases(
        self,
        owner: str,
        repo: str,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Release] | Any:
        """GET /repos/{owner}/{repo}/releases"""
        return self.fetch_as(paths.repo(owner, repo, RELEASES), list[Release], fmt, params)

    def create_release(
        self,
        owner: str,
        repo: str,
        tag_name: str,
        *,
        target_commitish: str | None = None,
        name: str | None = None,
        body: str | None = None,
        draft: bool | None = None,
        prerelease: bool | None = None,
        discussion_category_name: str | None = None,
        generate_release_notes: bool | None = None,
    ) -> Release:
        """
        POST /repos/{owner}/{repo}/releases

        Args:
            owner: Repository owner
            repo: Repository name
            tag_name: Tag to create the release from
            target_commitish: Branch or SHA the tag is created from, if new
            name: Release title
            body: Release notes
            draft: Create an unpublished draft
            prerelease: Mark as pre-release
            discussion_category_name: Open a linked discussion in this category
            generate_release_notes: Let GitHub generate name and notes

        Returns:
            The created Release
        """
        payload = Params(
            tag_name=tag_name,
            target_commitish=target_commitish,
            name=name,
            body=body,
            draft=draft,
            prerelease=prerelease,
            discussion_category_name=discussion_category_name,
            generate_release_notes=generate_release_notes,
        )
        return self._send_typed("POST", paths.repo(owner, repo, RELEASES), Release, body=payload)

    def generate_release_notes(
        self,
        owner: str,
        repo: str,
        tag_name: str,
        *,
        target_commitish: str | None = None,
        previous_tag_name: str | None = None,
        configuration_file_path: str | None = None,
    ) -> ReleaseNotes:
        """POST /repos/{owner}/{repo}/releases/generate-notes"""
        payload = Params(
            tag_name=tag_name,
            target_commitish=target_commitish,
            previous_tag_name=previous_tag_name,
            configuration_file_path=configuration_file_path,
        )
        return self._send_typed(
            "POST", paths.repo(owner, repo, RELEASES, "generate-notes"), ReleaseNotes, body=payload
        )

    def get_latest_release(
        self,
        owner: str,
        repo: str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Release | Any:
        """GET /repos/{owner}/{repo}/releases/latest"""
        return self.fetch_as(paths.repo(owner, repo, RELEASES, "latest"), Release, fmt)

    def get_release_by_tag(
        self,
        owner: str,
        repo: str,
        tag: str,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Release | Any:
        """GET /repos/{owner}/{repo}/releases/tags/{tag}"""
        return self.fetch_as(paths.repo(owner, repo, RELEASES, "tags", tag), Release, fmt)

    def get_release(
        self,
        owner: str,
        repo: str,
        release_id: int,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> Release | Any:
        """GET /repos/{owner}/{repo}/releases/{release_id}"""
        return self.fetch_as(paths.repo(owner, repo, RELEASES, release_id), Release, fmt)

    def update_release(
        self,
        owner: str,
        repo: str,
        release_id: int,
        *,
        tag_name: str | None = None,
        target_commitish: str | None = None,
        name: str | None = None,
        body: str | None = None,
        draft: bool | None = None,
        prerelease: bool | None = None,
    ) -> Release:
        """PATCH /repos/{owner}/{repo}/releases/{release_id} (only given fields change)"""
        payload = Params(
            tag_name=tag_name,
            target_commitish=target_commitish,
            name=name,
            body=body,
            draft=draft,
            prerelease=prerelease,
        )
        return self._send_typed(
            "PATCH", paths.repo(owner, repo, RELEASES, release_id), Release, body=payload
        )

    def delete_release(self, owner: str, repo: str, release_id: int) -> WriteResult:
        """DELETE /repos/{owner}/{repo}/releases/{release_id}"""
        return self._write("DELETE", paths.repo(owner, repo, RELEASES, release_id))

    # -------------------------------------------------------------------------
    # Assets
    # -------------------------------------------------------------------------
    def list_release_assets(
        self,
        owner: str,
        repo: str,
        release_id: int,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[ReleaseAsset] | Any:
        """GET /repos/{owner}/{repo}/releases/{release_id}/assets"""
        return self.fetch_as(
            paths.repo(owner, repo, RELEASES, release_id, ASSETS), list[ReleaseAsset], fmt, params
        )

    def get_release_asset(
        self,
        owner: str,
        repo: str,
        asset_id: int,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> ReleaseAsset | Any:
        """GET /repos/{owner}/{repo}/releases/assets/{asset_id}"""
        return self.fetch_as(paths.repo(owner, repo, RELEASES, ASSETS, asset_id), ReleaseAsset, fmt)

    def update_release_asset(
        self,
        owner: str,
        repo: str,
        asset_id: int,
        *,
        name: str | None = None,
        label: str | None = None,
        state: str | None = None,
    ) -> ReleaseAsset:
        """PATCH /repos/{owner}/{repo}/releases/assets/{asset_id}"""
        return self._send_typed(
            "PATCH",
            paths.repo(owner, repo, RELEASES, ASSETS, asset_id),
            ReleaseAsset,
            body=Params(name=name, label=label, state=state),
        )

    def delete_release_asset(self, owner: str, repo: str, asset_id: int) -> WriteResult:
        """DELETE /repos/{owner}/{repo}/releases/assets/{asset_id}"""
        return self._write("DELETE", paths.repo(owner, repo, RELEASES, ASSETS, asset_id))
