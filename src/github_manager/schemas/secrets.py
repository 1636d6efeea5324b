"""Records for GitHub Actions secrets.

See: https://docs.github.com/en/rest/actions/secrets
"""

from typing import Annotated, ClassVar

from pydantic import Field

from .base import GitHubList, GitHubResponse, timestamp_property
from .enums import Visibility, lenient_enum


class Secret(GitHubResponse):
    """A secret's metadata (GitHub never returns the value).

    Organization secrets also carry ``visibility`` and
    ``selected_repositories_url``; both are None for repository and
    environment secrets.
    """

    name: str | None = Field(default=None, description="Secret name")
    created_at: str | None = Field(default=None, description="Creation time (ISO-8601)")
    updated_at: str | None = Field(default=None, description="Last update (ISO-8601)")
    visibility: Annotated[Visibility | None, lenient_enum(Visibility)] = Field(
        default=None, description="all, private or selected (organization secrets)"
    )
    selected_repositories_url: str | None = Field(
        default=None, description="API URL listing repositories with access"
    )

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")


class SecretsList(GitHubList):
    """Maps to: GET .../actions/secrets"""

    items_key: ClassVar[str] = "secrets"

    secrets: list[Secret] = Field(default_factory=list)


class PublicKey(GitHubResponse):
    """Key used to seal secret values before upload."""

    key_id: str | None = Field(default=None, description="Identifier sent back with secrets")
    key: str | None = Field(default=None, description="Base64-encoded Curve25519 public key")
