"""Request plumbing shared by the endpoint managers.

This module provides:
- GitHubRequester: synchronous githubkit-backed HTTP helper
- Exceptions: GitHubClientError and its subclasses
- Params: ordered query/body parameters
- ReturnFormat / WriteResult: output format selector and write outcome

The manager base class lives in ``github_manager.core.manager``.
"""

from . import paths
from .client import GitHubRequester
from .exceptions import (
    GitHubAuthenticationError,
    GitHubClientError,
    GitHubDecodeError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubTransportError,
)
from .params import Params
from .results import ReturnFormat, WriteResult

__all__ = [
    # Client
    "GitHubRequester",
    # Exceptions
    "GitHubAuthenticationError",
    "GitHubClientError",
    "GitHubDecodeError",
    "GitHubNotFoundError",
    "GitHubRateLimitError",
    "GitHubTransportError",
    # Requests
    "Params",
    "paths",
    # Results
    "ReturnFormat",
    "WriteResult",
]
