"""Personnel-record (collaborator) lifecycle events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from audit_trail.domain.events.base import DomainEvent
from audit_trail.domain.events.snapshots import CollaboratorSnapshot


@dataclass(frozen=True, kw_only=True)
class CollaboratorEvent(DomainEvent):
    """Common shape: the collaborator snapshot and who acted on it."""

    collaborator: CollaboratorSnapshot
    performed_by: str | None = None


@dataclass(frozen=True, kw_only=True)
class CollaboratorCreated(CollaboratorEvent):
    """performed_by may be omitted when collaborator.created_by is set."""

    event_name: ClassVar[str] = "collaborator.created"


@dataclass(frozen=True, kw_only=True)
class CollaboratorUpdated(CollaboratorEvent):
    event_name: ClassVar[str] = "collaborator.updated"

    updated_fields: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class CollaboratorDeleted(CollaboratorEvent):
    event_name: ClassVar[str] = "collaborator.deleted"


@dataclass(frozen=True, kw_only=True)
class CollaboratorActivated(CollaboratorEvent):
    event_name: ClassVar[str] = "collaborator.activated"


@dataclass(frozen=True, kw_only=True)
class CollaboratorDeactivated(CollaboratorEvent):
    event_name: ClassVar[str] = "collaborator.deactivated"
