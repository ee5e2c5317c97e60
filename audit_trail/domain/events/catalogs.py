"""Catalog-entry lifecycle events (areas, adscripciones, puestos, document types).

All four catalogs raise the same five events over a CatalogEntrySnapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from audit_trail.domain.events.base import DomainEvent
from audit_trail.domain.events.snapshots import CatalogEntrySnapshot


@dataclass(frozen=True, kw_only=True)
class CatalogEntryEvent(DomainEvent):
    entry: CatalogEntrySnapshot
    performed_by: str | None = None


@dataclass(frozen=True, kw_only=True)
class CatalogEntryUpdated(CatalogEntryEvent):
    updated_fields: tuple[str, ...] = ()


# Areas


@dataclass(frozen=True, kw_only=True)
class AreaCreated(CatalogEntryEvent):
    event_name: ClassVar[str] = "area.created"


@dataclass(frozen=True, kw_only=True)
class AreaUpdated(CatalogEntryUpdated):
    event_name: ClassVar[str] = "area.updated"


@dataclass(frozen=True, kw_only=True)
class AreaDeleted(CatalogEntryEvent):
    event_name: ClassVar[str] = "area.deleted"


@dataclass(frozen=True, kw_only=True)
class AreaActivated(CatalogEntryEvent):
    event_name: ClassVar[str] = "area.activated"


@dataclass(frozen=True, kw_only=True)
class AreaDeactivated(CatalogEntryEvent):
    event_name: ClassVar[str] = "area.deactivated"


# Adscripciones (organizational sub-divisions)


@dataclass(frozen=True, kw_only=True)
class AdscripcionCreated(CatalogEntryEvent):
    event_name: ClassVar[str] = "adscripcion.created"


@dataclass(frozen=True, kw_only=True)
class AdscripcionUpdated(CatalogEntryUpdated):
    event_name: ClassVar[str] = "adscripcion.updated"


@dataclass(frozen=True, kw_only=True)
class AdscripcionDeleted(CatalogEntryEvent):
    event_name: ClassVar[str] = "adscripcion.deleted"


@dataclass(frozen=True, kw_only=True)
class AdscripcionActivated(CatalogEntryEvent):
    event_name: ClassVar[str] = "adscripcion.activated"


@dataclass(frozen=True, kw_only=True)
class AdscripcionDeactivated(CatalogEntryEvent):
    event_name: ClassVar[str] = "adscripcion.deactivated"


# Puestos (positions)


@dataclass(frozen=True, kw_only=True)
class PuestoCreated(CatalogEntryEvent):
    event_name: ClassVar[str] = "puesto.created"


@dataclass(frozen=True, kw_only=True)
class PuestoUpdated(CatalogEntryUpdated):
    event_name: ClassVar[str] = "puesto.updated"


@dataclass(frozen=True, kw_only=True)
class PuestoDeleted(CatalogEntryEvent):
    event_name: ClassVar[str] = "puesto.deleted"


@dataclass(frozen=True, kw_only=True)
class PuestoActivated(CatalogEntryEvent):
    event_name: ClassVar[str] = "puesto.activated"


@dataclass(frozen=True, kw_only=True)
class PuestoDeactivated(CatalogEntryEvent):
    event_name: ClassVar[str] = "puesto.deactivated"


# Document types


@dataclass(frozen=True, kw_only=True)
class DocumentTypeCreated(CatalogEntryEvent):
    event_name: ClassVar[str] = "documentType.created"


@dataclass(frozen=True, kw_only=True)
class DocumentTypeUpdated(CatalogEntryUpdated):
    event_name: ClassVar[str] = "documentType.updated"


@dataclass(frozen=True, kw_only=True)
class DocumentTypeDeleted(CatalogEntryEvent):
    event_name: ClassVar[str] = "documentType.deleted"


@dataclass(frozen=True, kw_only=True)
class DocumentTypeActivated(CatalogEntryEvent):
    event_name: ClassVar[str] = "documentType.activated"


@dataclass(frozen=True, kw_only=True)
class DocumentTypeDeactivated(CatalogEntryEvent):
    event_name: ClassVar[str] = "documentType.deactivated"
