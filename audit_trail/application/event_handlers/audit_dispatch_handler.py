"""Bridge from the event bus to audit record ingestion.

Auditing is a best-effort side effect: handle() never raises. Every failure
is logged here and goes nowhere else.
"""

from __future__ import annotations

from audit_trail.application.interfaces.services import IAuditRecordIngestion
from audit_trail.application.services.event_translator import AuditEventTranslator
from audit_trail.domain.events.base import DomainEvent
from audit_trail.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class AuditDispatchHandler:
    """Translate each delivered event and ingest the resulting record, if any."""

    def __init__(
        self,
        ingestion: IAuditRecordIngestion,
        translator: AuditEventTranslator | None = None,
    ) -> None:
        self._ingestion = ingestion
        self._translator = translator or AuditEventTranslator()

    async def handle(self, event: DomainEvent) -> None:
        event_name = event.event_name or type(event).__name__
        try:
            request = self._translator.translate(event)
            if request is None:
                logger.debug("No audit record for event %s (%s)", event_name, event.event_id)
                return
            await self._ingestion.execute(request)
        except Exception:
            # Audit failures must not reach the publisher of the business event.
            logger.exception(
                "Failed to record audit entry for event %s (%s)",
                event_name,
                event.event_id,
                extra={"event_name": event_name, "event_id": event.event_id},
            )
