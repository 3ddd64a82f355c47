"""The complete API client."""

from __future__ import annotations

from .target import TargetAPI
from .ticket import TicketAPI
from .ticket_audit import TicketAuditAPI
from .ticket_comment import TicketCommentAPI
from .ticket_field import TicketFieldAPI
from .ticket_form import TicketFormAPI
from .trigger import TriggerAPI
from .user import UserAPI
from .user_field import UserFieldAPI
from .view import ViewAPI
from .webhook import WebhookAPI


class Client(
    TargetAPI,
    TicketAPI,
    TicketAuditAPI,
    TicketCommentAPI,
    TicketFieldAPI,
    TicketFormAPI,
    TriggerAPI,
    UserAPI,
    UserFieldAPI,
    ViewAPI,
    WebhookAPI,
):
    """Client for every supported endpoint, sharing one session and credential."""