"""File-upload lifecycle events: collaborator documents and minutes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from audit_trail.domain.events.base import DomainEvent
from audit_trail.domain.events.snapshots import DocumentSnapshot, MinuteSnapshot


@dataclass(frozen=True, kw_only=True)
class DocumentEvent(DomainEvent):
    document: DocumentSnapshot
    performed_by: str | None = None


@dataclass(frozen=True, kw_only=True)
class DocumentCreated(DocumentEvent):
    """A document was uploaded. performed_by falls back to document.uploaded_by."""

    event_name: ClassVar[str] = "document.created"


@dataclass(frozen=True, kw_only=True)
class DocumentUpdated(DocumentEvent):
    event_name: ClassVar[str] = "document.updated"

    updated_fields: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class DocumentDeleted(DocumentEvent):
    event_name: ClassVar[str] = "document.deleted"


@dataclass(frozen=True, kw_only=True)
class DocumentDownloaded(DocumentEvent):
    event_name: ClassVar[str] = "document.downloaded"


@dataclass(frozen=True, kw_only=True)
class MinuteEvent(DomainEvent):
    minute: MinuteSnapshot
    performed_by: str | None = None


@dataclass(frozen=True, kw_only=True)
class MinuteCreated(MinuteEvent):
    """A minute was uploaded. performed_by falls back to minute.uploaded_by."""

    event_name: ClassVar[str] = "minute.created"


@dataclass(frozen=True, kw_only=True)
class MinuteUpdated(MinuteEvent):
    event_name: ClassVar[str] = "minute.updated"

    updated_fields: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class MinuteDeleted(MinuteEvent):
    event_name: ClassVar[str] = "minute.deleted"


@dataclass(frozen=True, kw_only=True)
class MinuteDownloaded(MinuteEvent):
    event_name: ClassVar[str] = "minute.downloaded"
