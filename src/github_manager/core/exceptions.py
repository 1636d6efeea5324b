"""GitHub manager exceptions."""

from datetime import datetime


class GitHubClientError(Exception):
    """Base exception for GitHub client errors.

    Carries the HTTP status code and the raw response body when the
    failure came from a GitHub response rather than the transport.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        response_text: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


class GitHubAuthenticationError(GitHubClientError):
    """Raised when authentication fails (401) or no token is configured."""

    pass


class GitHubNotFoundError(GitHubClientError):
    """Raised when a resource is not found (404)."""

    pass


class GitHubRateLimitError(GitHubClientError):
    """Raised when rate limit is exceeded (403 with exhausted quota, or 429)."""

    def __init__(
        self,
        message: str,
        reset_at: datetime | None = None,
        *,
        status_code: int | None = None,
        response_text: str | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, response_text=response_text)
        self.reset_at = reset_at


class GitHubTransportError(GitHubClientError):
    """Raised when the request never produced a response (network, timeout)."""

    pass


class GitHubDecodeError(GitHubClientError):
    """Raised when a response body is not the JSON shape a mapper expects."""

    pass
