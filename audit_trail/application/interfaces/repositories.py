"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities or application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from audit_trail.application.dtos.audit_record import (
        AuditRecordPage,
        AuditRecordQuery,
    )
    from audit_trail.domain.entities.audit_record import AuditRecord
    from audit_trail.domain.enums import AuditAction, AuditEntityType


# Audit record store interface
class IAuditRecordRepository(Protocol):
    """Protocol for the audit record store (DIP).

    Append-only: there is deliberately no update or delete operation. Records
    are written once by append() and only ever read afterwards.
    """

    async def append(self, record: AuditRecord) -> AuditRecord:
        """Persist a new record and return it as stored. Never overwrites an existing id."""
        ...

    async def get_by_id(self, record_id: str) -> AuditRecord | None:
        """Return the record with this id, or None."""
        ...

    async def query(self, query: AuditRecordQuery) -> AuditRecordPage:
        """Return one page of records matching query.filters plus the total match count."""
        ...

    async def find_by_entity(
        self,
        entity_type: AuditEntityType,
        entity_id: str,
        limit: int = 20,
        offset: int = 0,
    ) -> AuditRecordPage:
        """Records about one affected entity, newest first."""
        ...

    async def find_by_actor(
        self, actor_id: str, limit: int = 20, offset: int = 0
    ) -> AuditRecordPage:
        """Records credited to one actor, newest first."""
        ...

    async def find_by_action(
        self, action: AuditAction, limit: int = 20, offset: int = 0
    ) -> AuditRecordPage:
        """Records with one action, newest first."""
        ...

    async def find_by_date_range(
        self,
        date_from: datetime,
        date_to: datetime,
        limit: int = 20,
        offset: int = 0,
    ) -> AuditRecordPage:
        """Records created within [date_from, date_to], newest first."""
        ...
