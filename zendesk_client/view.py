"""Views: saved ticket lists."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .base import BaseClient
from .payload import decode, json_field
from .ticket import Ticket


@dataclass
class View:
    """A view definition."""

    id: int = json_field(omitempty=True, default=0)
    active: bool = False
    description: str = ""
    position: int = 0
    title: str = ""
    created_at: datetime | None = json_field(omitempty=True, default=None)
    updated_at: datetime | None = json_field(omitempty=True, default=None)


class ViewAPI(BaseClient):
    """View endpoints."""

    def get_views(self):
        """Return the views and the page metadata."""
        return self._list("/views.json", "views", View)

    def get_view(self, view_id):
        """Return the view with the given id."""
        result = self._get_json(f"/views/{view_id}.json")
        return decode(View, result.get("view"))

    def get_tickets_from_view(self, view_id):
        """Return the tickets listed by a view."""
        result = self._get_json(f"/views/{view_id}/tickets.json")
        return [decode(Ticket, item) for item in result.get("tickets") or []]