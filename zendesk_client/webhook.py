"""Webhooks: HTTP callbacks fired by events and business rules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .base import BaseClient
from .payload import decode, json_field


@dataclass
class WebhookAuthentication:
    """How the webhook authenticates against its endpoint."""

    type: str = ""
    data: Any = None
    add_position: str = ""


@dataclass
class WebhookSigningSecret:
    """The secret used to sign webhook requests."""

    algorithm: str = ""
    secret: str = ""


@dataclass
class Webhook:
    """A webhook definition."""

    authentication: WebhookAuthentication | None = json_field(
        omitempty=True, default=None
    )
    created_at: datetime | None = json_field(omitempty=True, default=None)
    created_by: str = json_field(omitempty=True, default="")
    description: str = json_field(omitempty=True, default="")
    endpoint: str = ""
    external_source: Any = json_field(omitempty=True, default=None)
    http_method: str = ""
    id: str = json_field(omitempty=True, default="")
    name: str = ""
    request_format: str = ""
    signing_secret: WebhookSigningSecret | None = json_field(
        omitempty=True, default=None
    )
    status: str = ""
    subscriptions: list[str] = json_field(omitempty=True, default_factory=list)
    updated_at: datetime | None = json_field(omitempty=True, default=None)
    updated_by: str = json_field(omitempty=True, default="")


def _maybe(cls, data):
    return None if data is None else decode(cls, data)


class WebhookAPI(BaseClient):
    """Webhook endpoints."""

    def create_webhook(self, hook):
        """Create a webhook and return it as stored, or None if none came back."""
        result = self._post_json("/webhooks", {"webhook": hook})
        return _maybe(Webhook, result.get("webhook"))

    def get_webhook(self, webhook_id):
        """Return the webhook with the given id, or None if none came back."""
        result = self._get_json(f"/webhooks/{webhook_id}")
        return _maybe(Webhook, result.get("webhook"))

    def update_webhook(self, webhook_id, hook):
        """Update the webhook with the given id."""
        self.put(f"/webhooks/{webhook_id}", {"webhook": hook})

    def delete_webhook(self, webhook_id):
        """Delete the webhook with the given id."""
        self.delete(f"/webhooks/{webhook_id}")

    def get_webhook_signing_secret(self, webhook_id):
        """Return the signing secret of a webhook, or None if none came back."""
        result = self._get_json(f"/webhooks/{webhook_id}/signing_secret")
        return _maybe(WebhookSigningSecret, result.get("signing_secret"))