"""In-memory audit record repository (implements IAuditRecordRepository).

Used when DATABASE_BACKEND=memory and in tests. Same contract as the
Firestore repository: append-only, filtered/sorted/paginated queries with totals.
"""

from __future__ import annotations

import asyncio
from copy import deepcopy

from audit_trail.application.dtos.audit_record import (
    AuditRecordFilters,
    AuditRecordPage,
    AuditRecordQuery,
)
from audit_trail.domain.entities.audit_record import AuditRecord
from audit_trail.domain.enums import SortField, SortOrder
from audit_trail.infrastructure.exceptions import RecordAlreadyExistsError
from audit_trail.infrastructure.record_store_base import BaseAuditRecordRepository


def _matches(record: AuditRecord, f: AuditRecordFilters) -> bool:
    if f.actor_id is not None and record.actor_id != f.actor_id:
        return False
    if f.action is not None and record.action is not f.action:
        return False
    if f.entity_type is not None and record.entity_type is not f.entity_type:
        return False
    if f.entity_id is not None and record.entity_id != f.entity_id:
        return False
    if f.date_from is not None and record.created_at < f.date_from:
        return False
    if f.date_to is not None and record.created_at > f.date_to:
        return False
    return True


def _copy(record: AuditRecord) -> AuditRecord:
    """Detached copy: metadata is rebuilt so nested values are not shared."""
    metadata = deepcopy(dict(record.metadata)) if record.metadata is not None else None
    return AuditRecord.from_persistence(record.id, {**record.to_dict(), "metadata": metadata})


class InMemoryAuditRecordRepository(BaseAuditRecordRepository):
    """Dict-backed store. Keeps insertion order; stores and returns copies."""

    def __init__(self) -> None:
        self._records: dict[str, AuditRecord] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._records)

    async def append(self, record: AuditRecord) -> AuditRecord:
        async with self._lock:
            if record.id in self._records:
                raise RecordAlreadyExistsError(record.id)
            self._records[record.id] = _copy(record)
        return _copy(record)

    async def get_by_id(self, record_id: str) -> AuditRecord | None:
        record = self._records.get(record_id)
        return _copy(record) if record is not None else None

    async def query(self, query: AuditRecordQuery) -> AuditRecordPage:
        matched = [r for r in self._records.values() if _matches(r, query.filters)]
        reverse = query.sort_order is SortOrder.DESC
        # Stable sorts: secondary key first, then the requested field.
        # Ties on action/entity_type stay newest first, as in Firestore.
        by_time_desc = reverse or query.sort_by is not SortField.CREATED_AT
        matched.sort(key=lambda r: r.created_at, reverse=by_time_desc)
        if query.sort_by is SortField.ACTION:
            matched.sort(key=lambda r: r.action.value, reverse=reverse)
        elif query.sort_by is SortField.ENTITY_TYPE:
            matched.sort(key=lambda r: r.entity_type.value, reverse=reverse)
        page = matched[query.offset : query.offset + query.limit]
        return AuditRecordPage(
            records=[_copy(r) for r in page],
            total=len(matched),
            limit=query.limit,
            offset=query.offset,
        )
