"""Records for repository webhooks.

See: https://docs.github.com/en/rest/webhooks/repos
"""

from pydantic import Field

from .base import GitHubModel, GitHubResponse, timestamp_property


class WebhookConfig(GitHubResponse):
    """Delivery settings of a webhook."""

    url: str | None = Field(default=None, description="Payload URL")
    content_type: str | None = Field(default=None, description="json or form")
    secret: str | None = Field(default=None, description="Masked signing secret")
    insecure_ssl: str | int | None = Field(
        default=None, description='"0" verifies TLS certificates, "1" skips verification'
    )


class WebhookLastResponse(GitHubModel):
    """Outcome of the most recent delivery."""

    code: int = Field(default=0, description="HTTP status of the last delivery")
    status: str | None = Field(default=None)
    message: str | None = Field(default=None)


class RepositoryWebhook(GitHubResponse):
    """A webhook registered on a repository."""

    id: int = Field(default=0, description="Hook ID")
    type: str | None = Field(default=None)
    name: str | None = Field(default=None, description="Always 'web'")
    active: bool = Field(default=False, description="Whether deliveries are sent")
    events: list[str] = Field(default_factory=list, description="Subscribed events")
    config: WebhookConfig | None = Field(default=None)
    last_response: WebhookLastResponse | None = Field(default=None)
    url: str | None = Field(default=None, description="API URL")
    test_url: str | None = Field(default=None)
    ping_url: str | None = Field(default=None)
    deliveries_url: str | None = Field(default=None)
    created_at: str | None = Field(default=None, description="Creation time (ISO-8601)")
    updated_at: str | None = Field(default=None, description="Last update (ISO-8601)")

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")
