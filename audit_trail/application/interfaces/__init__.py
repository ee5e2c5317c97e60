"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from audit_trail.infrastructure or audit_trail.api.
"""

from audit_trail.application.interfaces.repositories import IAuditRecordRepository
from audit_trail.application.interfaces.services import (
    EventHandler,
    IAuditRecordIngestion,
    IEventBus,
)

__all__ = [
    "EventHandler",
    "IAuditRecordIngestion",
    "IAuditRecordRepository",
    "IEventBus",
]
