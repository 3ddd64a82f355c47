"""Help center community topics."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Topic:
    """A community topic."""

    id: int = 0
    url: str = ""
    html_url: str = ""
    name: str = ""
    description: str = ""
    position: int = 0
    follower_count: int = 0
    manageable_by: str = ""
    user_segment_id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None