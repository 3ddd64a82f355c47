"""Ticket audits: the recorded history of changes to tickets."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .base import BaseClient, add_options
from .payload import decode, json_field


@dataclass
class PageOptions:
    """Offset paging for list endpoints."""

    page: int = json_field(omitempty=True, default=0)
    per_page: int = json_field(omitempty=True, default=0)


@dataclass
class CursorOptions:
    """Cursor paging for incremental list endpoints."""

    start_time: int = json_field(omitempty=True, default=0)
    cursor: str = json_field(omitempty=True, default="")


@dataclass
class TicketAuditSource:
    """Where the audited change came from and where it went."""

    to: Any = json_field(omitempty=True, default=None)
    from_: Any = json_field(key="from", omitempty=True, default=None)
    ref: str = json_field(omitempty=True, default="")


@dataclass
class TicketAuditVia:
    """The channel through which the audited change was made."""

    channel: str = json_field(omitempty=True, default="")
    source: TicketAuditSource = json_field(default_factory=TicketAuditSource)


@dataclass
class TicketAudit:
    """One audit entry of a ticket, with its events."""

    id: int = json_field(omitempty=True, default=0)
    ticket_id: int = json_field(omitempty=True, default=0)
    metadata: Any = json_field(omitempty=True, default=None)
    via: TicketAuditVia = json_field(default_factory=TicketAuditVia)
    created_at: datetime | None = json_field(omitempty=True, default=None)
    author_id: int = json_field(omitempty=True, default=0)
    events: list[Any] = json_field(omitempty=True, default_factory=list)


class TicketAuditAPI(BaseClient):
    """Ticket audit endpoints."""

    def get_all_ticket_audits(self, options=None):
        """Return audits across all tickets and the cursor metadata."""
        if options is None:
            options = CursorOptions()
        path = add_options("/ticket_audits.json", options)
        return self._list(path, "audits", TicketAudit)

    def get_ticket_audits(self, ticket_id, options=None):
        """Return the audits of one ticket and the page metadata."""
        if options is None:
            options = PageOptions()
        path = add_options(f"/tickets/{ticket_id}/audits.json", options)
        return self._list(path, "audits", TicketAudit)

    def get_ticket_audit(self, ticket_id, audit_id):
        """Return a single audit of a ticket."""
        result = self._get_json(f"/tickets/{ticket_id}/audits/{audit_id}.json")
        return decode(TicketAudit, result.get("audit"))