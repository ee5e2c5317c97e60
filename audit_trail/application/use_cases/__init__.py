"""Application use cases: one entry point per workflow."""

from audit_trail.application.use_cases.audit import (
    CreateAuditRecordUseCase,
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
