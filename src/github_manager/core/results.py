"""Result objects and output-format selection for manager operations."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from github_manager.logging import get_logger

from .exceptions import GitHubClientError

logger = get_logger(__name__)


class ReturnFormat(str, Enum):
    """Shape a raw API response can be delivered in."""

    JSON = "json"
    """Generic parsed JSON (dict / list)."""

    LIBRARY_OBJECT = "typed"
    """Typed record object decoded by the schema layer."""

    STRING = "raw"
    """The response body text, untouched."""


@dataclass(frozen=True)
class WriteResult:
    """Outcome of a write operation (create/update/delete/enable/disable/set).

    Write operations never raise for transport or status failures; they
    report them here instead. The result is truthy exactly when the
    request succeeded:

        result = manager.delete_repository_secret("octocat", "hello", "TOKEN")
        if not result:
            result.print_error_response()
    """

    ok: bool
    """True if GitHub answered with one of the expected status codes."""

    status_code: int | None = None
    """HTTP status code (None if the request never got a response)."""

    response_text: str | None = None
    """Raw body GitHub sent back, if any."""

    error: GitHubClientError | None = None
    """The failure that was captured, if any."""

    default_error_message: str | None = None
    """Manager-configured fallback text for failures without a body."""

    def __bool__(self) -> bool:
        return self.ok

    @property
    def error_response(self) -> str | None:
        """Diagnostic payload of a failed write as text (None on success)."""
        if self.ok:
            return None
        if self.response_text:
            return self.response_text
        if self.default_error_message:
            return self.default_error_message
        if self.error is not None:
            return str(self.error)
        return f"Unexpected status code {self.status_code}"

    @property
    def json_error_response(self) -> Any:
        """Diagnostic payload parsed as JSON, or None if absent/unparsable."""
        if self.ok or not self.response_text:
            return None
        try:
            return json.loads(self.response_text)
        except ValueError:
            return None

    def print_error_response(self) -> None:
        """Log the diagnostic payload of a failed write at ERROR level."""
        if not self.ok:
            logger.error("GitHub request failed ({}): {}", self.status_code, self.error_response)

    @classmethod
    def success(cls, status_code: int) -> WriteResult:
        """Build a successful result."""
        return cls(ok=True, status_code=status_code)

    @classmethod
    def failure(
        cls,
        *,
        status_code: int | None = None,
        response_text: str | None = None,
        error: GitHubClientError | None = None,
        default_error_message: str | None = None,
    ) -> WriteResult:
        """Build a failed result carrying its diagnostic payload."""
        return cls(
            ok=False,
            status_code=status_code,
            response_text=response_text,
            error=error,
            default_error_message=default_error_message,
        )
