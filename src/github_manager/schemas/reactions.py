"""Records for reactions.

See: https://docs.github.com/en/rest/reactions
"""

from typing import Annotated

from pydantic import Field

from .base import GitHubResponse, timestamp_property
from .common import User
from .enums import ReactionContent, strict_enum


class Reaction(GitHubResponse):
    """One emoji reaction left by a user."""

    id: int = Field(default=0, description="Reaction ID")
    node_id: str | None = Field(default=None, description="GraphQL node ID")
    user: User | None = Field(default=None, description="Who reacted")
    content: Annotated[ReactionContent | None, strict_enum(ReactionContent)] = Field(
        default=None, description="+1, -1, laugh, confused, heart, hooray, rocket or eyes"
    )
    created_at: str | None = Field(default=None, description="Creation time (ISO-8601)")

    created_at_timestamp = timestamp_property("created_at")
