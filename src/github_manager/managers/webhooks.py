"""Repository webhooks.

See: https://docs.github.com/en/rest/webhooks/repos
"""

from collections.abc import Iterable

from typing import Any

from github_manager.core import paths
from github_manager.core.manager import GitHubManager
from github_manager.core.params import Params
from github_manager.core.paths import HOOKS
from github_manager.core.results import ReturnFormat, WriteResult
from github_manager.schemas import RepositoryWebhook, WebhookConfig


def _config(
    url: str | None,
    content_type: str | None,
    secret: str | None,
    insecure_ssl: bool | None,
) -> Params:
    return Params(
        url=url,
        content_type=content_type,
        secret=secret,
        insecure_ssl=None if insecure_ssl is None else ("1" if insecure_ssl else "0"),
    )


def _events(events: Iterable[str] | None) -> list[str] | None:
    return list(events) if events is not None else None


class GitHubWebhooksManager(GitHubManager):
    """Create and maintain webhooks that deliver repository events."""

    def list_repository_webhooks(
        self,
        owner: str,
        repo: str,
        params: Params | None = None,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[RepositoryWebhook] | Any:
        """GET /repos/{owner}/{repo}/hooks"""
        return self.fetch_as(paths.repo(owner, repo, HOOKS), list[RepositoryWebhook], fmt, params)

    def create_repository_webhook(
        self,
        owner: str,
        repo: str,
        url: str,
        *,
        content_type: str | None = None,
        secret: str | None = None,
        insecure_ssl: bool | None = None,
        events: Iterable[str] | None = None,
        active: bool | None = None,
    ) -> RepositoryWebhook:
        """
        POST /repos/{owner}/{repo}/hooks

        Args:
            owner: Repository owner
            repo: Repository name
            url: Payload delivery URL
            content_type: ``json`` or ``form``
            secret: Key used to sign deliveries
            insecure_ssl: Skip TLS certificate verification
            events: Events to subscribe to (GitHub defaults to ``push``)
            active: Whether deliveries are sent

        Returns:
            The created RepositoryWebhook
        """
        body = Params(
            name="web",
            config=_config(url, content_type, secret, insecure_ssl),
            events=_events(events),
            active=active,
        )
        return self._send_typed("POST", paths.repo(owner, repo, HOOKS), RepositoryWebhook, body=body)

    def get_repository_webhook(
        self,
        owner: str,
        repo: str,
        hook_id: int,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> RepositoryWebhook | Any:
        """GET /repos/{owner}/{repo}/hooks/{hook_id}"""
        return self.fetch_as(paths.repo(owner, repo, HOOKS, hook_id), RepositoryWebhook, fmt)

    def update_repository_webhook(
        self,
        owner: str,
        repo: str,
        hook_id: int,
        *,
        events: Iterable[str] | None = None,
        add_events: Iterable[str] | None = None,
        remove_events: Iterable[str] | None = None,
        active: bool | None = None,
    ) -> RepositoryWebhook:
        """PATCH /repos/{owner}/{repo}/hooks/{hook_id}"""
        body = Params(
            events=_events(events),
            add_events=_events(add_events),
            remove_events=_events(remove_events),
            active=active,
        )
        return self._send_typed(
            "PATCH", paths.repo(owner, repo, HOOKS, hook_id), RepositoryWebhook, body=body
        )

    def delete_repository_webhook(self, owner: str, repo: str, hook_id: int) -> WriteResult:
        """DELETE /repos/{owner}/{repo}/hooks/{hook_id}"""
        return self._write("DELETE", paths.repo(owner, repo, HOOKS, hook_id))

    def get_webhook_config(
        self,
        owner: str,
        repo: str,
        hook_id: int,
        *,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> WebhookConfig | Any:
        """GET /repos/{owner}/{repo}/hooks/{hook_id}/config"""
        return self.fetch_as(paths.repo(owner, repo, HOOKS, hook_id, "config"), WebhookConfig, fmt)

    def update_webhook_config(
        self,
        owner: str,
        repo: str,
        hook_id: int,
        *,
        url: str | None = None,
        content_type: str | None = None,
        secret: str | None = None,
        insecure_ssl: bool | None = None,
    ) -> WebhookConfig:
        """PATCH /repos/{owner}/{repo}/hooks/{hook_id}/config"""
        return self._send_typed(
            "PATCH",
            paths.repo(owner, repo, HOOKS, hook_id, "config"),
            WebhookConfig,
            body=_config(url, content_type, secret, insecure_ssl),
        )

    def ping_repository_webhook(self, owner: str, repo: str, hook_id: int) -> WriteResult:
        """POST /repos/{owner}/{repo}/hooks/{hook_id}/pings"""
        return self._write("POST", paths.repo(owner, repo, HOOKS, hook_id, "pings"))

    def test_push_repository_webhook(self, owner: str, repo: str, hook_id: int) -> WriteResult:
        """POST /repos/{owner}/{repo}/hooks/{hook_id}/tests"""
        return self._write("POST", paths.repo(owner, repo, HOOKS, hook_id, "tests"))
