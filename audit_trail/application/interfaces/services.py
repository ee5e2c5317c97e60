"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from audit_trail.application.dtos.audit_record import AuditRecordCreate
    from audit_trail.domain.entities.audit_record import AuditRecord
    from audit_trail.domain.events.base import DomainEvent


EventHandler = Callable[["DomainEvent"], Awaitable[None]]


# Event bus interface
class IEventBus(Protocol):
    """Protocol for the domain event bus.

    publish() is fire-and-forget: it returns once delivery is scheduled and
    never surfaces handler outcomes to the publisher.
    """

    async def publish(self, event: DomainEvent) -> None:
        """Schedule delivery of event to every handler subscribed to its event_name."""
        ...

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        """Register handler for event_name. Subscribing the same handler twice is a no-op."""
        ...

    def unsubscribe(self, event_name: str, handler: EventHandler) -> None:
        """Remove handler for event_name if present."""
        ...


# Record ingestion interface (used by the dispatch handler)
class IAuditRecordIngestion(Protocol):
    """Protocol for the write path that turns a creation request into a stored record."""

    async def execute(self, request: AuditRecordCreate) -> AuditRecord:
        """Validate, persist and return the new record. Raises on invalid input or store failure."""
        ...
