"""Shared low-level GitHub requester built on githubkit.

Every manager funnels its HTTP traffic through one ``GitHubRequester``.
The requester owns the githubkit client, applies the configured timeout,
and converts githubkit failures into this package's exception taxonomy.
It does not decode bodies; that is the schema layer's job.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from githubkit import GitHub, Response
from githubkit.exception import RequestError, RequestFailed, RequestTimeout

from github_manager.config import ClientConfig
from github_manager.logging import get_logger

from .exceptions import (
    GitHubAuthenticationError,
    GitHubClientError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubTransportError,
)
from .params import Params

logger = get_logger(__name__)


class GitHubRequester:
    """Synchronous request helper shared by the endpoint managers.

    Usage:
        with GitHubRequester(ClientConfig(token="ghp_...")) as requester:
            response = requester.send("GET", "/rate_limit")
            print(response.status_code, response.text)
    """

    def __init__(self, config: ClientConfig) -> None:
        """Initialize the requester.

        Args:
            config: Immutable connection settings (token, timeout, base URL)
        """
        self._config = config
        self._client: GitHub[Any] | None = None

    @property
    def config(self) -> ClientConfig:
        """Connection settings this requester was built with."""
        return self._config

    @property
    def _github(self) -> GitHub[Any]:
        """Get or create the githubkit client instance."""
        if self._client is None:
            self._client = GitHub(
                self._config.token,
                base_url=self._config.base_url,
                timeout=self._config.request_timeout,
                auto_retry=False,
            )
        return self._client

    def send(
        self,
        method: str,
        path: str,
        *,
        params: Params | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> Response[Any]:
        """Issue one request and return the githubkit response.

        Args:
            method: HTTP method ("GET", "POST", "PUT", "PATCH", "DELETE")
            path: API path relative to the base URL (see ``core.paths``)
            params: Optional query parameters, sent in insertion order
            body: Optional JSON body

        Returns:
            The githubkit Response (status code, headers, text)

        Raises:
            GitHubAuthenticationError: On 401
            GitHubNotFoundError: On 404
            GitHubRateLimitError: On an exhausted quota (403/429)
            GitHubTransportError: When no response was received
            GitHubClientError: On any other error status
        """
        query = params.as_pairs() if params else None
        logger.debug("{} {}{}", method, path, params.to_query_string() if params else "")
        try:
            return self._github.request(method, path, params=query, json=body)
        except RequestFailed as e:
            raise self._handle_error(e) from e
        except RequestTimeout as e:
            raise GitHubTransportError(f"{method} {path} timed out") from e
        except RequestError as e:
            raise GitHubTransportError(f"{method} {path} failed: {e}") from e

    def close(self) -> None:
        """Drop the underlying githubkit client."""
        if self._client is not None:
            self._client = None

    def __enter__(self) -> GitHubRequester:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Error Handling
    # -------------------------------------------------------------------------
    def _handle_error(self, error: RequestFailed) -> GitHubClientError:
        """Convert githubkit exceptions to our custom exceptions."""
        response = error.response
        status = response.status_code
        text = response.text

        if status == 401:
            return GitHubAuthenticationError(
                "Invalid GitHub token", status_code=status, response_text=text
            )
        if status in (403, 429):
            headers = response.headers
            if status == 429 or headers.get("x-ratelimit-remaining") == "0":
                reset_ts = int(headers.get("x-ratelimit-reset", "0"))
                reset_at = datetime.fromtimestamp(reset_ts, tz=UTC) if reset_ts else None
                return GitHubRateLimitError(
                    "GitHub rate limit exceeded",
                    reset_at=reset_at,
                    status_code=status,
                    response_text=text,
                )
            return GitHubClientError(
                f"Access forbidden: {text}", status_code=status, response_text=text
            )
        if status == 404:
            return GitHubNotFoundError(
                f"Resource not found: {text}", status_code=status, response_text=text
            )
        return GitHubClientError(
            f"GitHub API error ({status}): {text}", status_code=status, response_text=text
        )
