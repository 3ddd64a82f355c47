"""Users: end users, agents and admins."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any

from .base import BaseClient, add_options
from .payload import decode, json_field


class UserRole(IntEnum):
    """Role types of a user."""

    END_USER = 0
    AGENT = 1
    ADMIN = 2


_USER_ROLE_TEXT = {
    UserRole.END_USER: "end-user",
    UserRole.AGENT: "agent",
    UserRole.ADMIN: "admin",
}


def user_role_text(role):
    """Return the role name for a role type, or "" if it is unknown."""
    return _USER_ROLE_TEXT.get(role, "")


@dataclass
class User:
    """A user account."""

    id: int = json_field(omitempty=True, default=0)
    url: str = json_field(omitempty=True, default="")
    email: str = json_field(omitempty=True, default="")
    name: str = ""
    active: bool = json_field(omitempty=True, default=False)
    alias: str = json_field(omitempty=True, default="")
    chat_only: bool = json_field(omitempty=True, default=False)
    custom_role_id: int = json_field(omitempty=True, default=0)
    default_group_id: int = json_field(omitempty=True, default=0)
    details: str = json_field(omitempty=True, default="")
    external_id: str = json_field(omitempty=True, default="")
    iana_timezone: str = json_field(key="iana_time_zone", omitempty=True, default="")
    locale: str = json_field(omitempty=True, default="")
    locale_id: int = json_field(omitempty=True, default=0)
    moderator: bool = json_field(omitempty=True, default=False)
    notes: str = json_field(omitempty=True, default="")
    only_private_comments: bool = json_field(omitempty=True, default=False)
    organization_id: int = json_field(omitempty=True, default=0)
    phone: str = json_field(omitempty=True, default="")
    photo: dict[str, Any] = json_field(omitempty=True, default_factory=dict)
    remote_photo_url: str = json_field(omitempty=True, default="")
    restricted_agent: bool = json_field(omitempty=True, default=False)
    role: str = json_field(omitempty=True, default="")
    role_type: int = json_field(omitempty=True, default=0)
    shared: bool = json_field(omitempty=True, default=False)
    shared_agent: bool = json_field(omitempty=True, default=False)
    shared_phone_number: bool = json_field(omitempty=True, default=False)
    signature: str = json_field(omitempty=True, default="")
    suspended: bool = json_field(omitempty=True, default=False)
    tags: list[str] = json_field(omitempty=True, default_factory=list)
    ticket_restriction: str = json_field(omitempty=True, default="")
    timezone: str = json_field(key="time_zone", omitempty=True, default="")
    two_factor_auth_enabled: bool = json_field(omitempty=True, default=False)
    user_fields: dict[str, Any] | None = None
    verified: bool = json_field(omitempty=True, default=False)
    report_csv: bool = json_field(omitempty=True, default=False)
    last_login_at: datetime | None = json_field(omitempty=True, default=None)
    created_at: datetime | None = json_field(omitempty=True, default=None)
    updated_at: datetime | None = json_field(omitempty=True, default=None)


@dataclass
class UserListOptions:
    """Paging and filters for the user list."""

    page: int = json_field(omitempty=True, default=0)
    per_page: int = json_field(omitempty=True, default=0)
    role: str = json_field(omitempty=True, default="")
    roles: list[str] = json_field(key="role[]", omitempty=True, default_factory=list)
    permission_set: int = json_field(omitempty=True, default=0)


@dataclass
class GetManyUsersOptions:
    """Comma-separated ids or external ids of the users to fetch."""

    external_ids: str = json_field(omitempty=True, default="")
    ids: str = json_field(omitempty=True, default="")


@dataclass
class SearchUsersOptions:
    """Search criteria for users."""

    external_ids: str = json_field(omitempty=True, default="")
    query: str = json_field(omitempty=True, default="")


@dataclass
class UserRelated:
    """Counts of items related to a user."""

    assigned_tickets: int = 0
    requested_tickets: int = 0
    ccd_tickets: int = 0
    organization_subscriptions: int = 0


class UserAPI(BaseClient):
    """User endpoints."""

    def get_users(self, options=None):
        """Return a page of users and the page metadata."""
        if options is None:
            options = UserListOptions()
        return self._list(add_options("/users.json", options), "users", User)

    def search_users(self, options=None):
        """Return users matching the search criteria and the page metadata."""
        if options is None:
            options = SearchUsersOptions()
        return self._list(add_options("/users/search.json", options), "users", User)

    def get_many_users(self, options=None):
        """Return the users with the given ids and the page metadata."""
        if options is None:
            options = GetManyUsersOptions()
        return self._list(add_options("/users/show_many.json", options), "users", User)

    def create_user(self, user):
        """Create a user and return it as stored."""
        result = self._post_json("/users.json", {"user": user})
        return decode(User, result.get("user"))

    def create_or_update_user(self, user):
        """Create a user, or update the one that matches, and return it."""
        result = self._post_json("/users/create_or_update.json", {"user": user})
        return decode(User, result.get("user"))

    def get_user(self, user_id):
        """Return the user with the given id."""
        result = self._get_json(f"/users/{user_id}.json")
        return decode(User, result.get("user"))

    def update_user(self, user_id, user):
        """Update a user and return it as stored."""
        result = self._put_json(f"/users/{user_id}.json", {"user": user})
        return decode(User, result.get("user"))

    def get_user_related(self, user_id):
        """Return the counts of items related to a user."""
        result = self._get_json(f"/users/{user_id}/related.json")
        return decode(UserRelated, result.get("user_related"))