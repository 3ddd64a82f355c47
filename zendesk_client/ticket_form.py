"""Ticket forms: sets of ticket fields offered to requesters and agents."""

from __future__ import annotations

from dataclasses import dataclass

from .base import BaseClient, add_options
from .payload import decode, json_field


@dataclass
class TicketForm:
    """A ticket form."""

    id: int = json_field(omitempty=True, default=0)
    url: str = json_field(omitempty=True, default="")
    name: str = ""
    raw_name: str = json_field(omitempty=True, default="")
    display_name: str = json_field(omitempty=True, default="")
    raw_display_name: str = json_field(omitempty=True, default="")
    position: int = 0
    active: bool = json_field(omitempty=True, default=False)
    end_user_visible: bool = json_field(omitempty=True, default=False)
    default: bool = json_field(omitempty=True, default=False)
    ticket_field_ids: list[int] = json_field(omitempty=True, default_factory=list)
    in_all_brands: bool = json_field(omitempty=True, default=False)
    restricted_brand_ids: list[int] = json_field(omitempty=True, default_factory=list)


@dataclass
class TicketFormListOptions:
    """Paging and filters for the ticket form list."""

    page: int = json_field(omitempty=True, default=0)
    per_page: int = json_field(omitempty=True, default=0)
    active: bool = json_field(omitempty=True, default=False)
    end_user_visible: bool = json_field(omitempty=True, default=False)
    fallback_to_default: bool = json_field(omitempty=True, default=False)
    associated_to_brand: bool = json_field(omitempty=True, default=False)


class TicketFormAPI(BaseClient):
    """Ticket form endpoints."""

    def get_ticket_forms(self, options=None):
        """Return the ticket forms and the page metadata."""
        if options is None:
            options = TicketFormListOptions()
        path = add_options("/ticket_forms.json", options)
        return self._list(path, "ticket_forms", TicketForm)

    def create_ticket_form(self, form):
        """Create a ticket form and return it as stored."""
        result = self._post_json("/ticket_forms.json", {"ticket_form": form})
        return decode(TicketForm, result.get("ticket_form"))

    def get_ticket_form(self, form_id):
        """Return the ticket form with the given id."""
        result = self._get_json(f"/ticket_forms/{form_id}.json")
        return decode(TicketForm, result.get("ticket_form"))

    def update_ticket_form(self, form_id, form):
        """Update a ticket form and return it as stored."""
        result = self._put_json(f"/ticket_forms/{form_id}.json", {"ticket_form": form})
        return decode(TicketForm, result.get("ticket_form"))

    def delete_ticket_form(self, form_id):
        """Delete the ticket form with the given id."""
        self.delete(f"/ticket_forms/{form_id}.json")