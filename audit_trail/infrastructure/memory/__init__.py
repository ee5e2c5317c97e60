"""Process-local substitutes for infrastructure adapters."""

from audit_trail.infrastructure.memory.audit_record_repo import (
    InMemoryAuditRecordRepository,
)

__all__ = ["InMemoryAuditRecordRepository"]
