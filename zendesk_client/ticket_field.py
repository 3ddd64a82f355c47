"""Ticket fields: the system and custom fields shown on tickets."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .base import BaseClient
from .payload import decode, json_field


@dataclass
class TicketFieldSystemFieldOption:
    """One value of a system field such as priority or status."""

    id: int = 0
    name: str = ""
    position: int = 0
    raw_name: str = ""
    url: str = ""
    value: str = ""


@dataclass
class TicketField:
    """A ticket field definition."""

    id: int = json_field(omitempty=True, default=0)
    url: str = json_field(omitempty=True, default="")
    type: str = ""
    title: str = ""
    raw_title: str = json_field(omitempty=True, default="")
    description: str = json_field(omitempty=True, default="")
    raw_description: str = json_field(omitempty=True, default="")
    position: int = json_field(omitempty=True, default=0)
    active: bool = json_field(omitempty=True, default=False)
    required: bool = json_field(omitempty=True, default=False)
    collapsed_for_agents: bool = json_field(omitempty=True, default=False)
    regexp_for_validation: str = json_field(omitempty=True, default="")
    title_in_portal: str = json_field(omitempty=True, default="")
    raw_title_in_portal: str = json_field(omitempty=True, default="")
    visible_in_portal: bool = json_field(omitempty=True, default=False)
    editable_in_portal: bool = json_field(omitempty=True, default=False)
    required_in_portal: bool = json_field(omitempty=True, default=False)
    tag: str = json_field(omitempty=True, default="")
    created_at: datetime | None = json_field(omitempty=True, default=None)
    updated_at: datetime | None = json_field(omitempty=True, default=None)
    system_field_options: list[TicketFieldSystemFieldOption] = json_field(
        omitempty=True, default_factory=list
    )
    custom_field_options: list[dict[str, Any]] = json_field(
        omitempty=True, default_factory=list
    )
    sub_type_id: int = json_field(omitempty=True, default=0)
    removable: bool = json_field(omitempty=True, default=False)
    agent_description: str = json_field(omitempty=True, default="")


class TicketFieldAPI(BaseClient):
    """Ticket field endpoints."""

    def get_ticket_fields(self):
        """Return the ticket fields and the page metadata."""
        return self._list("/ticket_fields.json", "ticket_fields", TicketField)

    def create_ticket_field(self, field):
        """Create a ticket field and return it as stored."""
        result = self._post_json("/ticket_fields.json", {"ticket_field": field})
        return decode(TicketField, result.get("ticket_field"))

    def get_ticket_field(self, field_id):
        """Return the ticket field with the given id."""
        result = self._get_json(f"/ticket_fields/{field_id}.json")
        return decode(TicketField, result.get("ticket_field"))

    def update_ticket_field(self, field_id, field):
        """Update a ticket field and return it as stored."""
        result = self._put_json(
            f"/ticket_fields/{field_id}.json", {"ticket_field": field}
        )
        return decode(TicketField, result.get("ticket_field"))

    def delete_ticket_field(self, field_id):
        """Delete the ticket field with the given id."""
        self.delete(f"/ticket_fields/{field_id}.json")