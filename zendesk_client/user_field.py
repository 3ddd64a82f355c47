"""User fields: custom fields defined on user profiles."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .base import BaseClient, add_options
from .payload import json_field


@dataclass
class UserField:
    """A user field definition."""

    id: int = json_field(omitempty=True, default=0)
    url: str = json_field(omitempty=True, default="")
    key: str = json_field(omitempty=True, default="")
    type: str = ""
    title: str = ""
    raw_title: str = json_field(omitempty=True, default="")
    description: str = json_field(omitempty=True, default="")
    raw_description: str = json_field(omitempty=True, default="")
    position: int = json_field(omitempty=True, default=0)
    active: bool = json_field(omitempty=True, default=False)
    system: bool = json_field(omitempty=True, default=False)
    regexp_for_validation: str = json_field(omitempty=True, default="")
    tag: str = json_field(omitempty=True, default="")
    custom_field_options: list[dict[str, Any]] = json_field(default_factory=list)
    created_at: datetime | None = json_field(omitempty=True, default=None)
    updated_at: datetime | None = json_field(omitempty=True, default=None)


@dataclass
class UserFieldListOptions:
    """Paging for the user field list."""

    page: int = json_field(omitempty=True, default=0)
    per_page: int = json_field(omitempty=True, default=0)


class UserFieldAPI(BaseClient):
    """User field endpoints."""

    def get_user_fields(self, options=None):
        """Return the user fields and the page metadata."""
        if options is None:
            options = UserFieldListOptions()
        path = add_options("/user_fields.json", options)
        return self._list(path, "user_fields", UserField)