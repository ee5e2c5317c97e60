"""Account (user) lifecycle events raised by the users module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from audit_trail.domain.events.base import DomainEvent
from audit_trail.domain.events.snapshots import UserSnapshot


@dataclass(frozen=True, kw_only=True)
class UserCreated(DomainEvent):
    """A user account was created. performed_by may be omitted when user.created_by is set."""

    event_name: ClassVar[str] = "user.created"

    user: UserSnapshot
    performed_by: str | None = None


@dataclass(frozen=True, kw_only=True)
class UserUpdated(DomainEvent):
    event_name: ClassVar[str] = "user.updated"

    user: UserSnapshot
    updated_fields: tuple[str, ...] = ()
    performed_by: str | None = None


@dataclass(frozen=True, kw_only=True)
class UserDeleted(DomainEvent):
    event_name: ClassVar[str] = "user.deleted"

    user_id: str
    performed_by: str | None = None


@dataclass(frozen=True, kw_only=True)
class UserActivated(DomainEvent):
    event_name: ClassVar[str] = "user.activated"

    user_id: str
    performed_by: str | None = None


@dataclass(frozen=True, kw_only=True)
class UserDeactivated(DomainEvent):
    event_name: ClassVar[str] = "user.deactivated"

    user_id: str
    performed_by: str | None = None


@dataclass(frozen=True, kw_only=True)
class UserPasswordChanged(DomainEvent):
    event_name: ClassVar[str] = "user.password_changed"

    user_id: str
    performed_by: str | None = None
