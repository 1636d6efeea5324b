"""Reactions on issues, commit comments and releases.

See: https://docs.github.com/en/rest/reactions/reactions
"""

from typing import Any

from github_manager.core import paths
from github_manager.core.manager import GitHubManager
from github_manager.core.params import Params
from github_manager.core.paths import COMMENTS, ISSUES, REACTIONS, RELEASES
from github_manager.core.results import ReturnFormat, WriteResult
from github_manager.schemas import Reaction, ReactionContent


def _content(content: ReactionContent | str | None) -> ReactionContent | None:
    return ReactionContent.parse(content) if content is not None else None


class GitHubReactionsManager(GitHubManager):
    """List, add and remove emoji reactions.

    ``content`` arguments accept a ``ReactionContent`` or any string the
    enum understands, including ``"+1"`` and ``"-1"``.
    """

    # -------------------------------------------------------------------------
    # Issues
    # -------------------------------------------------------------------------
    def list_issue_reactions(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        content: ReactionContent | str | None = None,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Reaction] | Any:
        """GET /repos/{owner}/{repo}/issues/{issue_number}/reactions"""
        return self.fetch_as(
            paths.repo(owner, repo, ISSUES, issue_number, REACTIONS),
            list[Reaction],
            fmt,
            Params.of(params, content=_content(content)),
        )

    def create_issue_reaction(
        self, owner: str, repo: str, issue_number: int, content: ReactionContent | str
    ) -> Reaction:
        """POST /repos/{owner}/{repo}/issues/{issue_number}/reactions"""
        return self._send_typed(
            "POST",
            paths.repo(owner, repo, ISSUES, issue_number, REACTIONS),
            Reaction,
            body={"content": _content(content)},
        )

    def delete_issue_reaction(
        self, owner: str, repo: str, issue_number: int, reaction_id: int
    ) -> WriteResult:
        """DELETE /repos/{owner}/{repo}/issues/{issue_number}/reactions/{reaction_id}"""
        return self._write(
            "DELETE", paths.repo(owner, repo, ISSUES, issue_number, REACTIONS, reaction_id)
        )

    # -------------------------------------------------------------------------
    # Commit comments
    # -------------------------------------------------------------------------
    def list_commit_comment_reactions(
        self,
        owner: str,
        repo: str,
        comment_id: int,
        content: ReactionContent | str | None = None,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Reaction] | Any:
        """GET /repos/{owner}/{repo}/comments/{comment_id}/reactions"""
        return self.fetch_as(
            paths.repo(owner, repo, COMMENTS, comment_id, REACTIONS),
            list[Reaction],
            fmt,
            Params.of(params, content=_content(content)),
        )

    def create_commit_comment_reaction(
        self, owner: str, repo: str, comment_id: int, content: ReactionContent | str
    ) -> Reaction:
        """POST /repos/{owner}/{repo}/comments/{comment_id}/reactions"""
        return self._send_typed(
            "POST",
            paths.repo(owner, repo, COMMENTS, comment_id, REACTIONS),
            Reaction,
            body={"content": _content(content)},
        )

    def delete_commit_comment_reaction(
        self, owner: str, repo: str, comment_id: int, reaction_id: int
    ) -> WriteResult:
        """DELETE /repos/{owner}/{repo}/comments/{comment_id}/reactions/{reaction_id}"""
        return self._write(
            "DELETE", paths.repo(owner, repo, COMMENTS, comment_id, REACTIONS, reaction_id)
        )

    # -------------------------------------------------------------------------
    # Releases
    # -------------------------------------------------------------------------
    def list_release_reactions(
        self,
        owner: str,
        repo: str,
        release_id: int,
        content: ReactionContent | str | None = None,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Reaction] | Any:
        """GET /repos/{owner}/{repo}/releases/{release_id}/reactions"""
        return self.fetch_as(
            paths.repo(owner, repo, RELEASES, release_id, REACTIONS),
            list[Reaction],
            fmt,
            Params.of(params, content=_content(content)),
        )

    def create_release_reaction(
        self, owner: str, repo: str, release_id: int, content: ReactionContent | str
    ) -> Reaction:
        """POST /repos/{owner}/{repo}/releases/{release_id}/reactions"""
        return self._send_typed(
            "POST",
            paths.repo(owner, repo, RELEASES, release_id, REACTIONS),
            Reaction,
            body={"content": _content(content)},
        )

    def delete_release_reaction(
        self, owner: str, repo: str, release_id: int, reaction_id: int
    ) -> WriteResult:
        """DELETE /repos/{owner}/{repo}/releases/{release_id}/reactions/{reaction_id}"""
        return self._write(
            "DELETE", paths.repo(owner, repo, RELEASES, release_id, REACTIONS, reaction_id)
        )
