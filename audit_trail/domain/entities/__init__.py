"""Domain entities."""

from audit_trail.domain.entities.audit_record import AuditRecord

__all__ = ["AuditRecord"]
