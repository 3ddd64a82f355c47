"""Targets: external email and HTTP destinations for notifications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .base import BaseClient
from .payload import decode, json_field


@dataclass
class Target:
    """An email or HTTP target."""

    url: str = json_field(omitempty=True, default="")
    id: int = json_field(omitempty=True, default=0)
    created_at: datetime | None = json_field(omitempty=True, default=None)
    type: str = ""
    title: str = ""
    active: bool = json_field(omitempty=True, default=False)
    email: str = json_field(omitempty=True, default="")
    subject: str = json_field(omitempty=True, default="")
    target_url: str = json_field(omitempty=True, default="")
    method: str = json_field(omitempty=True, default="")
    username: str = json_field(omitempty=True, default="")
    password: str = json_field(omitempty=True, default="")
    content_type: str = json_field(omitempty=True, default="")


class TargetAPI(BaseClient):
    """Target endpoints."""

    def get_targets(self):
        """Return the targets and the page metadata."""
        return self._list("/targets.json", "targets", Target)

    def create_target(self, target):
        """Create a target and return it as stored."""
        result = self._post_json("/targets.json", {"target": target})
        return decode(Target, result.get("target"))

    def get_target(self, target_id):
        """Return the target with the given id."""
        result = self._get_json(f"/targets/{target_id}.json")
        return decode(Target, result.get("target"))

    def update_target(self, target_id, target):
        """Update a target and return it as stored."""
        result = self._put_json(f"/targets/{target_id}.json", {"target": target})
        return decode(Target, result.get("target"))

    def delete_target(self, target_id):
        """Delete the target with the given id."""
        self.delete(f"/targets/{target_id}.json")