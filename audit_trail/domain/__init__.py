"""Domain layer: audit record entity, enums, domain events, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from audit_trail.domain.entities import AuditRecord
from audit_trail.domain.enums import AuditAction, AuditEntityType, SortField, SortOrder
from audit_trail.domain.exceptions import (
    AuditRecordNotFoundException,
    AuditTrailException,
    ValidationException,
)

__all__ = [
    # Entities
    "AuditRecord",
    # Enums
    "AuditAction",
    "AuditEntityType",
    "SortField",
    "SortOrder",
    # Exceptions
    "AuditRecordNotFoundException",
    "AuditTrailException",
    "ValidationException",
]
