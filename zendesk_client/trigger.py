"""Triggers: business rules that run when tickets are created or updated."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .base import BaseClient, OptionsError, add_options
from .payload import decode, json_field


@dataclass
class TriggerCondition:
    """One condition a ticket must meet for a trigger to fire."""

    field: str = ""
    operator: str = ""
    value: Any = None


@dataclass
class TriggerAction:
    """One change a trigger applies to a ticket."""

    field: str = ""
    value: Any = None


@dataclass
class TriggerConditions:
    """Conditions that must all hold, and conditions of which any may hold."""

    all_: list[TriggerCondition] = json_field(key="all", default_factory=list)
    any_: list[TriggerCondition] = json_field(key="any", default_factory=list)


@dataclass
class Trigger:
    """A trigger definition."""

    id: int = json_field(omitempty=True, default=0)
    title: str = ""
    active: bool = json_field(omitempty=True, default=False)
    position: int = json_field(omitempty=True, default=0)
    conditions: TriggerConditions = json_field(default_factory=TriggerConditions)
    actions: list[TriggerAction] = json_field(default_factory=list)
    description: str = json_field(omitempty=True, default="")
    category_id: str = json_field(omitempty=True, default="")
    created_at: datetime | None = json_field(omitempty=True, default=None)
    updated_at: datetime | None = json_field(omitempty=True, default=None)


@dataclass
class TriggerListOptions:
    """Paging, filters and sorting for the trigger list."""

    page: int = json_field(omitempty=True, default=0)
    per_page: int = json_field(omitempty=True, default=0)
    active: bool = json_field(omitempty=True, default=False)
    category_id: str = json_field(omitempty=True, default="")
    sort_by: str = json_field(omitempty=True, default="")
    sort_order: str = json_field(omitempty=True, default="")


class TriggerAPI(BaseClient):
    """Trigger endpoints."""

    def get_triggers(self, options):
        """Return the triggers and the page metadata; options are required."""
        if options is None:
            raise OptionsError(options)
        path = add_options("/triggers.json", options)
        return self._list(path, "triggers", Trigger)

    def create_trigger(self, trigger):
        """Create a trigger and return it as stored."""
        result = self._post_json("/triggers.json", {"trigger": trigger})
        return decode(Trigger, result.get("trigger"))

    def get_trigger(self, trigger_id):
        """Return the trigger with the given id."""
        result = self._get_json(f"/triggers/{trigger_id}.json")
        return decode(Trigger, result.get("trigger"))

    def update_trigger(self, trigger_id, trigger):
        """Update a trigger and return it as stored."""
        result = self._put_json(f"/triggers/{trigger_id}.json", {"trigger": trigger})
        return decode(Trigger, result.get("trigger"))

    def delete_trigger(self, trigger_id):
        """Delete the trigger with the given id."""
        self.delete(f"/triggers/{trigger_id}.json")