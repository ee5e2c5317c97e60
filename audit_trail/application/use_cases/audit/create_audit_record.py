"""Audit record ingestion: the only write path into the record store."""

from __future__ import annotations

from audit_trail.application.dtos.audit_record import AuditRecordCreate
from audit_trail.application.interfaces.repositories import IAuditRecordRepository
from audit_trail.domain.entities.audit_record import AuditRecord
from audit_trail.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class CreateAuditRecordUseCase:
    """Validate a creation request, assign id and timestamps, append to the store.

    Not idempotent: every call appends a new record with a fresh id, even for
    identical input. Validation and store failures propagate to the caller.
    """

    def __init__(self, record_repo: IAuditRecordRepository) -> None:
        self._record_repo = record_repo

    async def execute(self, request: AuditRecordCreate) -> AuditRecord:
        record = AuditRecord.create(
            actor_id=request.actor_id,
            action=request.action,
            entity_type=request.entity_type,
            entity_id=request.entity_id,
            metadata=request.metadata,
        )
        stored = await self._record_repo.append(record)
        logger.info(
            "Audit record %s created: %s %s/%s by %s",
            stored.id,
            stored.action.value,
            stored.entity_type.value,
            stored.entity_id,
            stored.actor_id,
        )
        return stored
