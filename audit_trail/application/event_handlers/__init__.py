"""Event handlers subscribed to the domain event bus."""

from audit_trail.application.event_handlers.audit_dispatch_handler import (
    AuditDispatchHandler,
)

__all__ = ["AuditDispatchHandler"]
