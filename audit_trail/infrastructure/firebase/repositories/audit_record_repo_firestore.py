"""Firestore-backed audit record repository (implements IAuditRecordRepository)."""

from __future__ import annotations

from typing import Any

import httpx

from audit_trail.application.dtos.audit_record import AuditRecordPage, AuditRecordQuery
from audit_trail.domain.entities.audit_record import AuditRecord
from audit_trail.domain.enums import SortField
from audit_trail.infrastructure.exceptions import (
    RecordAlreadyExistsError,
    RecordStoreReadError,
    RecordStoreUnavailableError,
    RecordStoreWriteError,
)
from audit_trail.infrastructure.firebase._rest_client import (
    DocumentExistsError,
    FirestoreRESTClient,
    _Query,
)
from audit_trail.infrastructure.firebase.collections import COLLECTION_AUDIT_RECORDS
from audit_trail.infrastructure.record_store_base import BaseAuditRecordRepository
from audit_trail.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_BACKEND = "firestore"


def _to_document(record: AuditRecord) -> dict[str, Any]:
    data = record.to_dict()
    data.pop("id")
    data.pop("updated_at")
    return data


def _reason(exc: Exception) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}"
    return type(exc).__name__


class FirestoreAuditRecordRepository(BaseAuditRecordRepository):
    """Append-only audit record store on Firestore.

    append() uses createDocument with the record id, so an existing document is
    never overwritten. Listing uses runQuery for the page and
    runAggregationQuery COUNT for the total.
    """

    def __init__(
        self,
        client: FirestoreRESTClient,
        collection: str = COLLECTION_AUDIT_RECORDS,
    ) -> None:
        self._client = client
        self._coll = client.collection(collection)

    async def append(self, record: AuditRecord) -> AuditRecord:
        try:
            await self._coll.create(record.id, _to_document(record))
        except DocumentExistsError as e:
            raise RecordAlreadyExistsError(record.id) from e
        except httpx.HTTPStatusError as e:
            raise RecordStoreWriteError(record.id, _reason(e)) from e
        except httpx.HTTPError as e:
            raise RecordStoreUnavailableError(_BACKEND, _reason(e)) from e
        return record

    async def get_by_id(self, record_id: str) -> AuditRecord | None:
        try:
            doc = await self._coll.document(record_id).get()
        except httpx.HTTPStatusError as e:
            raise RecordStoreReadError("get", _reason(e)) from e
        except httpx.HTTPError as e:
            raise RecordStoreUnavailableError(_BACKEND, _reason(e)) from e
        if not doc:
            return None
        return AuditRecord.from_persistence(doc.id, doc.to_dict())

    def _filtered(self, query: AuditRecordQuery) -> _Query:
        q = self._coll.query()
        f = query.filters
        if f.actor_id is not None:
            q = q.where("actor_id", "==", f.actor_id)
        if f.action is not None:
            q = q.where("action", "==", f.action.value)
        if f.entity_type is not None:
            q = q.where("entity_type", "==", f.entity_type.value)
        if f.entity_id is not None:
            q = q.where("entity_id", "==", f.entity_id)
        if f.date_from is not None:
            q = q.where("created_at", ">=", f.date_from)
        if f.date_to is not None:
            q = q.where("created_at", "<=", f.date_to)
        return q

    async def query(self, query: AuditRecordQuery) -> AuditRecordPage:
        page_query = self._filtered(query).order_by(
            query.sort_by.value, query.sort_order.value
        )
        if query.sort_by is not SortField.CREATED_AT:
            page_query = page_query.order_by("created_at", "desc")
        page_query = page_query.offset(query.offset).limit(query.limit)
        try:
            records = [
                AuditRecord.from_persistence(doc.id, doc.to_dict())
                async for doc in page_query.stream()
            ]
            total = await self._filtered(query).count()
        except httpx.HTTPStatusError as e:
            logger.error("Firestore audit query failed: %s", _reason(e))
            raise RecordStoreReadError("query", _reason(e)) from e
        except httpx.HTTPError as e:
            raise RecordStoreUnavailableError(_BACKEND, _reason(e)) from e
        return AuditRecordPage(
            records=records, total=total, limit=query.limit, offset=query.offset
        )
