"""DTOs for audit record use cases (no dependency on storage or presentation schemas)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from audit_trail.domain.entities.audit_record import AuditRecord
from audit_trail.domain.enums import (
    AuditAction,
    AuditEntityType,
    SortField,
    SortOrder,
)


@dataclass(frozen=True)
class AuditRecordCreate:
    """Input for creating an audit record. Built by the translator or by direct callers.

    Values are raw: the ingestion use case validates and trims them.
    """

    actor_id: str
    action: AuditAction | str
    entity_type: AuditEntityType | str
    entity_id: str
    metadata: dict[str, Any] | None = None


@dataclass(frozen=True)
class AuditRecordFilters:
    """Validated listing filters. None means no constraint; date bounds are inclusive."""

    actor_id: str | None = None
    action: AuditAction | None = None
    entity_type: AuditEntityType | None = None
    entity_id: str | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None


@dataclass(frozen=True)
class AuditRecordQuery:
    """Filters plus paging and ordering, as handed to the record store."""

    filters: AuditRecordFilters = field(default_factory=AuditRecordFilters)
    limit: int = 20
    offset: int = 0
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC


@dataclass(frozen=True)
class AuditRecordPage:
    """One page of records plus the total count matching the filters (ignoring paging)."""

    records: list[AuditRecord]
    total: int
    limit: int
    offset: int

    @property
    def total_pages(self) -> int:
        if self.limit <= 0:
            return 0
        return math.ceil(self.total / self.limit)
