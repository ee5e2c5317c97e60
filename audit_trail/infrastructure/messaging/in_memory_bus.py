"""In-process domain event bus on asyncio.

publish() schedules one task per subscribed handler and returns without
awaiting them. Handler errors are logged here and never reach the publisher.
"""

from __future__ import annotations

import asyncio
from collections import defaultdict

from audit_trail.application.interfaces.services import EventHandler
from audit_trail.domain.events.base import DomainEvent
from audit_trail.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class InMemoryEventBus:
    """Fire-and-forget event bus (IEventBus). One instance per process, injected where needed."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)
        self._pending: set[asyncio.Task[None]] = set()

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        handlers = self._handlers[event_name]
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, event_name: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_name)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def handler_count(self, event_name: str | None = None) -> int:
        """Handlers for one event name, or across all names when event_name is None."""
        if event_name is not None:
            return len(self._handlers.get(event_name, ()))
        return sum(len(h) for h in self._handlers.values())

    def clear(self) -> None:
        """Drop every subscription. Deliveries already scheduled still run."""
        self._handlers.clear()

    @property
    def pending(self) -> int:
        """Deliveries scheduled but not finished."""
        return len(self._pending)

    async def publish(self, event: DomainEvent) -> None:
        self._dispatch_local(event)

    def _dispatch_local(self, event: DomainEvent) -> None:
        handlers = list(self._handlers.get(event.event_name, ()))
        if not handlers:
            logger.debug("No subscribers for event %s", event.event_name)
            return
        for handler in handlers:
            task = asyncio.create_task(self._deliver(handler, event))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    async def _deliver(self, handler: EventHandler, event: DomainEvent) -> None:
        try:
            await handler(event)
        except Exception:
            logger.exception(
                "Event handler %r failed for %s (%s)",
                handler,
                event.event_name,
                event.event_id,
            )

    async def drain(self) -> None:
        """Wait for every scheduled delivery, including ones scheduled while waiting."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
