"""Base class shared by every endpoint manager.

A manager composes request paths, sends them through a ``GitHubRequester``
and hands the body to the schema layer. Reads come in three explicitly
named shapes:

    manager.fetch_raw(path)                 # response text
    manager.fetch_json(path)                # parsed dict / list
    manager.fetch_typed(path, RunnersList)  # typed record

Writes without a meaningful body return a ``WriteResult`` and never raise.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any, Self, TypeVar

from github_manager.config import ClientConfig, get_settings
from github_manager.logging import get_logger
from github_manager.schemas.base import decode, load_json

from .client import GitHubRequester
from .exceptions import GitHubAuthenticationError, GitHubClientError
from .params import Params
from .results import ReturnFormat, WriteResult

logger = get_logger(__name__)

T = TypeVar("T")

NO_CONTENT = (204,)
CREATED_OR_NO_CONTENT = (201, 204)


class GitHubManager:
    """Base endpoint manager.

    Construct with an explicit token (plus optional error message and
    timeout), with a prepared ``ClientConfig``, with a shared requester, or
    with nothing at all to read the token from settings/environment:

        GitHubRunnersManager("ghp_...")
        GitHubRunnersManager("ghp_...", default_error_message="failed", request_timeout=10)
        GitHubRunnersManager(config=ClientConfig(token="ghp_..."))
        GitHubRunnersManager()  # uses GITHUB_TOKEN
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        default_error_message: str | None = None,
        request_timeout: float | None = None,
        config: ClientConfig | None = None,
        requester: GitHubRequester | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            token: GitHub personal access token
            default_error_message: Text reported by failed writes without a body
            request_timeout: Per-request timeout in seconds
            config: Prepared connection settings (excludes the other arguments)
            requester: Requester to share with other managers (caller closes it)

        Raises:
            GitHubAuthenticationError: If no token is given or configured
            ValueError: If a config or requester is combined with other settings
        """
        if requester is not None:
            given = (token, default_error_message, request_timeout, config)
            if any(value is not None for value in given):
                raise ValueError("Pass either a shared requester or connection settings, not both")
            self._requester = requester
            self._owns_requester = False
            return

        if config is not None:
            if token is not None or default_error_message is not None or request_timeout is not None:
                raise ValueError("Pass either a ClientConfig or individual settings, not both")
        else:
            config = self._build_config(token, default_error_message, request_timeout)

        self._requester = GitHubRequester(config)
        self._owns_requester = True

    @staticmethod
    def _build_config(
        token: str | None,
        default_error_message: str | None,
        request_timeout: float | None,
    ) -> ClientConfig:
        if token is not None:
            if not token:
                raise GitHubAuthenticationError("GitHub token must not be empty")
            return ClientConfig(
                token=token,
                default_error_message=default_error_message,
                request_timeout=request_timeout,
            )

        settings = get_settings()
        if not settings.github_token:
            raise GitHubAuthenticationError("GITHUB_TOKEN not set in environment")
        config = ClientConfig.from_settings(settings)
        overrides = {
            key: value
            for key, value in (
                ("default_error_message", default_error_message),
                ("request_timeout", request_timeout),
            )
            if value is not None
        }
        if not overrides:
            return config
        return ClientConfig.model_validate({**config.model_dump(), **overrides})

    @property
    def config(self) -> ClientConfig:
        """Connection settings in use."""
        return self._requester.config

    @property
    def requester(self) -> GitHubRequester:
        """The requester this manager sends through (shareable)."""
        return self._requester

    @property
    def default_error_message(self) -> str | None:
        return self._requester.config.default_error_message

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def fetch_raw(self, path: str, params: Mapping[str, Any] | None = None) -> str:
        """GET ``path`` and return the response body untouched."""
        return self._requester.send("GET", path, params=Params.of(params)).text

    def fetch_json(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET ``path`` and return the body as parsed JSON (dict or list)."""
        return load_json(self.fetch_raw(path, params))

    def fetch_typed(
        self,
        path: str,
        model: type[T],
        params: Mapping[str, Any] | None = None,
    ) -> T:
        """
        GET ``path`` and decode the body into ``model``.

        Args:
            path: API path (see ``core.paths``)
            model: Record class, or a container such as ``list[Release]``
            params: Optional query parameters

        Returns:
            Decoded record

        Raises:
            GitHubClientError: On any request failure (see ``GitHubRequester.send``)
            pydantic.ValidationError: If the body does not fit ``model``
        """
        return decode(self.fetch_raw(path, params), model)

    def fetch_as(
        self,
        path: str,
        model: type[T],
        fmt: ReturnFormat,
        params: Mapping[str, Any] | None = None,
    ) -> T | Any | str:
        """GET ``path`` and deliver the body in the caller-selected format.

        Every manager read method routes its ``fmt`` keyword through here.
        """
        return self.dispatch(self.fetch_raw(path, params), model, fmt)

    @staticmethod
    def dispatch(text: str, model: type[T], fmt: ReturnFormat) -> T | Any | str:
        """
        Convert one raw response body into the requested shape.

        Args:
            text: Response body
            model: Record type used for ``ReturnFormat.LIBRARY_OBJECT``
            fmt: Desired output format

        Returns:
            ``text`` itself, its parsed JSON, or the decoded record
        """
        if fmt is ReturnFormat.STRING:
            return text
        if fmt is ReturnFormat.JSON:
            return load_json(text)
        return decode(text, model)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def _send_typed(
        self,
        method: str,
        path: str,
        model: type[T],
        *,
        body: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> T:
        """Send a write whose response body is a resource; failures raise."""
        response = self._requester.send(
            method,
            path,
            params=Params.of(params),
            body=Params.of(body).to_payload() if body is not None else None,
        )
        return decode(response.text, model)

    def _write(
        self,
        method: str,
        path: str,
        *,
        body: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        expected: Collection[int] = NO_CONTENT,
    ) -> WriteResult:
        """
        Send a write whose outcome is only its status code.

        Args:
            method: HTTP method
            path: API path
            body: Optional JSON body (``None`` values dropped)
            params: Optional query parameters
            expected: Status codes that count as success

        Returns:
            WriteResult, truthy iff the status is in ``expected``
        """
        try:
            response = self._requester.send(
                method,
                path,
                params=Params.of(params),
                body=Params.of(body).to_payload() if body is not None else None,
            )
        except GitHubClientError as e:
            return self._failure(method, path, e)

        if response.status_code in expected:
            return WriteResult.success(response.status_code)

        logger.warning(
            "{} {} returned unexpected status {}", method, path, response.status_code
        )
        return WriteResult.failure(
            status_code=response.status_code,
            response_text=response.text or None,
            default_error_message=self.default_error_message,
        )

    def _failure(self, method: str, path: str, error: GitHubClientError) -> WriteResult:
        """Capture a failed write instead of raising it."""
        logger.warning("{} {} failed: {}", method, path, error)
        return WriteResult.failure(
            status_code=error.status_code,
            response_text=error.response_text,
            error=error,
            default_error_message=self.default_error_message,
        )

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------
    def close(self) -> None:
        """Close the requester if this manager created it."""
        if self._owns_requester:
            self._requester.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()
