"""Application DTOs (use case inputs and read models)."""

from audit_trail.application.dtos.audit_record import (
    AuditRecordCreate,
    AuditRecordFilters,
    AuditRecordPage,
    AuditRecordQuery,
)

__all__ = [
    "AuditRecordCreate",
    "AuditRecordFilters",
    "AuditRecordPage",
    "AuditRecordQuery",
]
