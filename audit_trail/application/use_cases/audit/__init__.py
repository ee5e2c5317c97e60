"""Audit record use cases: ingestion (write) and queries (read)."""

from audit_trail.application.use_cases.audit.create_audit_record import (
    CreateAuditRecordUseCase,
)
from audit_trail.application.use_cases.audit.query_audit_records import (
    GetAuditRecordByIdUseCase,
    GetAuditRecordsByActorUseCase,
    GetAuditRecordsByEntityUseCase,
    ListAuditRecordsUseCase,
)

__all__ = [
    "CreateAuditRecordUseCase",
    "GetAuditRecordByIdUseCase",
    "GetAuditRecordsByActorUseCase",
    "GetAuditRecordsByEntityUseCase",
    "ListAuditRecordsUseCase",
]
