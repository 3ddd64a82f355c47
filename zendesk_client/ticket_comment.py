"""Ticket comments and the via information attached to tickets and comments."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .base import BaseClient
from .payload import decode, json_field


@dataclass
class ViaSource:
    """Where a ticket or comment came from and where it was sent to."""

    from_: dict[str, Any] | None = json_field(key="from", default=None)
    to: dict[str, Any] | None = None
    rel: str = ""


@dataclass
class Via:
    """The channel a ticket or comment arrived through."""

    channel: str = ""
    source: ViaSource = json_field(default_factory=ViaSource)


@dataclass
class TicketComment:
    """A comment on a ticket.

    ``public`` is tri-state: ``None`` leaves the choice to the API,
    which treats such comments as public.
    """

    id: int = json_field(omitempty=True, default=0)
    type: str = json_field(omitempty=True, default="")
    body: str = json_field(omitempty=True, default="")
    html_body: str = json_field(omitempty=True, default="")
    plain_body: str = json_field(omitempty=True, default="")
    public: bool | None = None
    author_id: int = json_field(omitempty=True, default=0)
    attachments: list[dict[str, Any]] = json_field(
        omitempty=True, default_factory=list
    )
    created_at: datetime | None = json_field(omitempty=True, default=None)
    uploads: list[str] = json_field(omitempty=True, default_factory=list)
    metadata: dict[str, Any] = json_field(omitempty=True, default_factory=dict)
    via: Via | None = json_field(omitempty=True, default=None)

    @classmethod
    def public_comment(cls, body, author_id):
        """Return a new comment visible to the requester."""
        return cls(body=body, public=True, author_id=author_id)

    @classmethod
    def private_comment(cls, body, author_id):
        """Return a new internal note."""
        return cls(body=body, public=False, author_id=author_id)


class TicketCommentAPI(BaseClient):
    """Ticket comment endpoints."""

    def create_ticket_comment(self, ticket_id, comment):
        """Add a comment to a ticket by updating it."""
        payload = {"ticket": {"comment": comment}}
        result = self._put_json(f"/tickets/{ticket_id}.json", payload)
        return decode(TicketComment, result)

    def list_ticket_comments(self, ticket_id):
        """Return the comments of a ticket."""
        result = self._get_json(f"/tickets/{ticket_id}/comments.json")
        return [decode(TicketComment, item) for item in result.get("comments") or []]

    def make_comment_private(self, ticket_id, comment_id):
        """Turn an existing comment into an internal note."""
        self.put(f"/tickets/{ticket_id}/comments/{comment_id}/make_private", None)