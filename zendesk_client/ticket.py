"""Tickets and the ticket endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .base import BaseClient, add_options
from .payload import decode, json_field
from .ticket_comment import TicketComment, Via


def _invalid(value) -> ValueError:
    return ValueError(f"{type(value).__name__} is an invalid type for custom field value")


@dataclass
class CustomField:
    """A ticket custom field value: a string, a list of strings, a bool or None."""

    id: int = 0
    value: Any = None

    @classmethod
    def from_json(cls, data):
        """Build a custom field, rejecting values of any other type."""
        if not isinstance(data, Mapping):
            raise ValueError(f"cannot decode {type(data).__name__} into CustomField")
        raw_id = data.get("id")
        if isinstance(raw_id, bool) or not isinstance(raw_id, (int, float)):
            raise ValueError("custom field id must be a number")
        value = data.get("value")
        if value is None or isinstance(value, (str, bool)):
            return cls(id=int(raw_id), value=value)
        if isinstance(value, list):
            for item in value:
                if not isinstance(item, str):
                    raise _invalid(item)
            return cls(id=int(raw_id), value=list(value))
        raise _invalid(value)


@dataclass
class SatisfactionRating:
    """The satisfaction rating attached to a ticket."""

    id: int = 0
    score: str = ""
    comment: str = ""


@dataclass
class Requester:
    """A requester to create along with a new ticket."""

    name: str = json_field(omitempty=True, default="")
    email: str = json_field(omitempty=True, default="")
    locale_id: str = json_field(omitempty=True, default="")


@dataclass
class Ticket:
    """A support ticket."""

    id: int = json_field(omitempty=True, default=0)
    url: str = json_field(omitempty=True, default="")
    external_id: str = json_field(omitempty=True, default="")
    type: str = json_field(omitempty=True, default="")
    subject: str = json_field(omitempty=True, default="")
    raw_subject: str = json_field(omitempty=True, default="")
    description: str = json_field(omitempty=True, default="")
    priority: str = json_field(omitempty=True, default="")
    status: str = json_field(omitempty=True, default="")
    custom_status_id: int = json_field(omitempty=True, default=0)
    recipient: str = json_field(omitempty=True, default="")
    requester_id: int = json_field(omitempty=True, default=0)
    submitter_id: int = json_field(omitempty=True, default=0)
    assignee_id: int = json_field(omitempty=True, default=0)
    organization_id: int = json_field(omitempty=True, default=0)
    group_id: int = json_field(omitempty=True, default=0)
    collaborator_ids: list[int] = json_field(omitempty=True, default_factory=list)
    follower_ids: list[int] = json_field(omitempty=True, default_factory=list)
    email_cc_ids: list[int] = json_field(omitempty=True, default_factory=list)
    forum_topic_id: int = json_field(omitempty=True, default=0)
    problem_id: int = json_field(omitempty=True, default=0)
    has_incidents: bool = json_field(omitempty=True, default=False)
    due_at: datetime | None = json_field(omitempty=True, default=None)
    tags: list[str] = json_field(omitempty=True, default_factory=list)
    custom_fields: list[CustomField] = json_field(omitempty=True, default_factory=list)
    via: Via | None = json_field(omitempty=True, default=None)
    satisfaction_rating: SatisfactionRating | None = json_field(
        omitempty=True, default=None
    )
    sharing_agreement_ids: list[int] = json_field(omitempty=True, default_factory=list)
    followup_ids: list[int] = json_field(omitempty=True, default_factory=list)
    via_followup_source_id: int = json_field(omitempty=True, default=0)
    macro_ids: list[int] = json_field(omitempty=True, default_factory=list)
    ticket_form_id: int = json_field(omitempty=True, default=0)
    brand_id: int = json_field(omitempty=True, default=0)
    allow_channelback: bool = json_field(omitempty=True, default=False)
    allow_attachments: bool = json_field(omitempty=True, default=False)
    is_public: bool = json_field(omitempty=True, default=False)
    created_at: datetime | None = json_field(omitempty=True, default=None)
    updated_at: datetime | None = json_field(omitempty=True, default=None)
    # Write-only: collaborators, comment and requester are sent on create/update.
    collaborators: Any = json_field(omitempty=True, default=None)
    comment: TicketComment | None = json_field(omitempty=True, default=None)
    requester: Requester | None = json_field(omitempty=True, default=None)
    # Collision protection for updates.
    updated_stamp: datetime | None = json_field(omitempty=True, default=None)
    safe_update: bool = json_field(omitempty=True, default=False)


@dataclass
class TicketListOptions:
    """Paging and sorting for the ticket list.

    ``sort_by`` takes "assignee", "assignee.name", "created_at", "group", "id",
    "locale", "requester", "requester.name", "status", "subject" or
    "updated_at"; ``sort_order`` takes "asc" or "desc".
    """

    page: int = json_field(omitempty=True, default=0)
    per_page: int = json_field(omitempty=True, default=0)
    sort_by: str = json_field(omitempty=True, default="")
    sort_order: str = json_field(omitempty=True, default="")


class TicketAPI(BaseClient):
    """Ticket endpoints."""

    def get_tickets(self, options=None):
        """Return a page of tickets and the page metadata."""
        if options is None:
            options = TicketListOptions()
        return self._list(add_options("/tickets.json", options), "tickets", Ticket)

    def get_ticket(self, ticket_id):
        """Return the ticket with the given id."""
        result = self._get_json(f"/tickets/{ticket_id}.json")
        return decode(Ticket, result.get("ticket"))

    def get_multiple_tickets(self, ticket_ids):
        """Return the tickets with the given ids."""
        ids = ",".join(str(ticket_id) for ticket_id in ticket_ids)
        path = add_options("/tickets/show_many.json", {"ids": ids or None})
        tickets, _ = self._list(path, "tickets", Ticket)
        return tickets

    def create_ticket(self, ticket):
        """Create a ticket and return it as stored."""
        result = self._post_json("/tickets.json", {"ticket": ticket})
        return decode(Ticket, result.get("ticket"))

    def update_ticket(self, ticket_id, ticket):
        """Update a ticket and return it as stored."""
        result = self._put_json(f"/tickets/{ticket_id}.json", {"ticket": ticket})
        return decode(Ticket, result.get("ticket"))

    def delete_ticket(self, ticket_id):
        """Delete the ticket with the given id."""
        self.delete(f"/tickets/{ticket_id}.json")