"""Base audit record repository: narrowing queries expressed through query()."""

from datetime import datetime

from audit_trail.application.dtos.audit_record import (
    AuditRecordFilters,
    AuditRecordPage,
    AuditRecordQuery,
)
from audit_trail.domain.entities.audit_record import AuditRecord
from audit_trail.domain.enums import AuditAction, AuditEntityType


class BaseAuditRecordRepository:
    """Implements find_by_* on top of query(). Subclasses provide append, get_by_id, query.

    There is no update or delete hook to override: the store is append-only.
    """

    async def append(self, record: AuditRecord) -> AuditRecord:
        raise NotImplementedError

    async def get_by_id(self, record_id: str) -> AuditRecord | None:
        raise NotImplementedError

    async def query(self, query: AuditRecordQuery) -> AuditRecordPage:
        raise NotImplementedError

    async def _narrow(
        self, filters: AuditRecordFilters, limit: int, offset: int
    ) -> AuditRecordPage:
        return await self.query(AuditRecordQuery(filters=filters, limit=limit, offset=offset))

    async def find_by_entity(
        self,
        entity_type: AuditEntityType,
        entity_id: str,
        limit: int = 20,
        offset: int = 0,
    ) -> AuditRecordPage:
        return await self._narrow(
            AuditRecordFilters(entity_type=entity_type, entity_id=entity_id), limit, offset
        )

    async def find_by_actor(
        self, actor_id: str, limit: int = 20, offset: int = 0
    ) -> AuditRecordPage:
        return await self._narrow(AuditRecordFilters(actor_id=actor_id), limit, offset)

    async def find_by_action(
        self, action: AuditAction, limit: int = 20, offset: int = 0
    ) -> AuditRecordPage:
        return await self._narrow(AuditRecordFilters(action=action), limit, offset)

    async def find_by_date_range(
        self,
        date_from: datetime,
        date_to: datetime,
        limit: int = 20,
        offset: int = 0,
    ) -> AuditRecordPage:
        return await self._narrow(
            AuditRecordFilters(date_from=date_from, date_to=date_to), limit, offset
        )
