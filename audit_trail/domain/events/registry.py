"""Event name → event class lookup for deserializing events off the bus."""

from __future__ import annotations

from typing import Any

from audit_trail.domain.events import accounts, catalogs, collaborators, documents, sessions
from audit_trail.domain.events.base import DomainEvent


def _concrete_events(*modules: Any) -> dict[str, type[DomainEvent]]:
    found: dict[str, type[DomainEvent]] = {}
    for module in modules:
        for obj in vars(module).values():
            if (
                isinstance(obj, type)
                and issubclass(obj, DomainEvent)
                and obj.event_name
            ):
                if obj.event_name in found and found[obj.event_name] is not obj:
                    raise RuntimeError(f"Duplicate event name: {obj.event_name}")
                found[obj.event_name] = obj
    return found


EVENT_TYPES: dict[str, type[DomainEvent]] = _concrete_events(
    accounts, collaborators, documents, catalogs, sessions
)


def known_event_names() -> list[str]:
    """Return every registered event name, sorted."""
    return sorted(EVENT_TYPES)


def event_from_dict(data: dict[str, Any]) -> DomainEvent:
    """Rebuild a domain event from DomainEvent.to_dict() output.

    Raises:
        ValueError: If event_name is missing or not registered.
    """
    name = data.get("event_name")
    event_cls = EVENT_TYPES.get(name) if isinstance(name, str) else None
    if event_cls is None:
        raise ValueError(f"Unknown domain event: {name!r}")
    return event_cls.from_dict(data)
