"""Pytest configuration and shared fixtures.

Usage Guide:
- For record decoding tests: use the payload dicts in tests.fixtures
- For manager tests: use ``requester`` (a real GitHubRequester whose
  githubkit client is ``github_client``, a MagicMock) and queue responses
  with ``github_client.request.return_value = make_response(...)``
- For failure paths: raise ``request_failed(status, ...)`` from the mock
"""

import json
from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
from githubkit.exception import RequestFailed
from nacl import encoding, public

from github_manager.config import ClientConfig, get_settings
from github_manager.core.client import GitHubRequester

# -----------------------------------------------------------------------------
# Test Timeline Constants
#
# A consistent "test epoch" for deterministic timestamp assertions.
# -----------------------------------------------------------------------------
JAN_10_ISO = "2024-01-10T09:00:00Z"
JAN_12_ISO = "2024-01-12T16:00:00Z"
JAN_15_ISO = "2024-01-15T10:00:00Z"
JAN_16_ISO = "2024-01-16T14:00:00Z"

JAN_10_MILLIS = 1704877200000
JAN_16_MILLIS = 1705413600000

TEST_TOKEN = "ghp_testtoken1234567890"

ResponseFactory = Callable[..., MagicMock]


# -----------------------------------------------------------------------------
# Environment isolation
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear cached settings and GitHub variables so tests never see a real token."""
    for name in ("GITHUB_TOKEN", "GITHUB_API_URL", "REQUEST_TIMEOUT", "DEFAULT_ERROR_MESSAGE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# -----------------------------------------------------------------------------
# Fake githubkit responses
# -----------------------------------------------------------------------------
def _fake_response(
    status_code: int = 200,
    body: Any = None,
    headers: dict[str, str] | None = None,
) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    if body is None:
        response.text = ""
    elif isinstance(body, str):
        response.text = body
    else:
        response.text = json.dumps(body)
    response.headers = headers or {}
    return response


@pytest.fixture
def make_response() -> ResponseFactory:
    """Factory for fake githubkit responses: ``make_response(200, {...})``."""
    return _fake_response


@pytest.fixture
def request_failed() -> Callable[..., RequestFailed]:
    """Factory for githubkit ``RequestFailed`` errors carrying a fake response."""

    def _build(
        status_code: int,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> RequestFailed:
        return RequestFailed(_fake_response(status_code, body, headers))

    return _build


# -----------------------------------------------------------------------------
# Requester / client
# -----------------------------------------------------------------------------
@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(token=TEST_TOKEN, default_error_message="request failed")


@pytest.fixture
def github_client() -> MagicMock:
    """Stand-in for the githubkit ``GitHub`` instance."""
    return MagicMock()


@pytest.fixture
def requester(client_config: ClientConfig, github_client: MagicMock) -> GitHubRequester:
    """A real requester wired to the mocked githubkit client."""
    requester = GitHubRequester(client_config)
    requester._client = github_client
    return requester


def sent_request(github_client: MagicMock) -> tuple[str, str, dict[str, Any]]:
    """``(method, path, kwargs)`` of the last request sent to the mock."""
    args, kwargs = github_client.request.call_args
    return args[0], args[1], kwargs


# -----------------------------------------------------------------------------
# Secrets
# -----------------------------------------------------------------------------
@pytest.fixture
def key_pair() -> public.PrivateKey:
    """Fresh Curve25519 key pair standing in for a GitHub secrets key."""
    return public.PrivateKey.generate()


@pytest.fixture
def public_key_payload(key_pair: public.PrivateKey) -> dict[str, str]:
    """Body of a ``.../secrets/public-key`` response for ``key_pair``."""
    from tests.fixtures.github_responses import GITHUB_PUBLIC_KEY_ID

    return {
        "key_id": GITHUB_PUBLIC_KEY_ID,
        "key": key_pair.public_key.encode(encoding.Base64Encoder()).decode("utf-8"),
    }
