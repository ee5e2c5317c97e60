"""Base class for domain events published on the event bus.

Events are immutable facts raised by use cases after their own transaction
commits. Each concrete event declares a dotted event_name used for bus
routing and serialization.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, get_args, get_origin, get_type_hints

from audit_trail.shared.utils.datetime import parse_datetime, utc_now
from audit_trail.shared.utils.generators import generate_cuid


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Immutable domain event.

    Attributes:
        event_name: Routing key (e.g. 'collaborator.created'); set per subclass.
        event_id: Unique id of this occurrence.
        occurred_on: When the originating operation completed (UTC).
    """

    event_name: ClassVar[str] = ""

    event_id: str = field(default_factory=generate_cuid)
    occurred_on: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to JSON-friendly primitives (datetimes as ISO-8601)."""
        data: dict[str, Any] = {"event_name": self.event_name}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if dataclasses.is_dataclass(value):
                value = dataclasses.asdict(value)
            elif isinstance(value, datetime):
                value = value.isoformat()
            elif isinstance(value, tuple):
                value = list(value)
            data[f.name] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DomainEvent:
        """Rebuild an event of this class from to_dict() output.

        Unknown keys are ignored; nested snapshots and datetimes are restored
        from their field annotations.
        """
        hints = get_type_hints(cls)
        kwargs: dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            hint = hints.get(f.name)
            if value is None:
                pass
            elif hint is datetime or datetime in get_args(hint):
                value = parse_datetime(value)
            elif isinstance(hint, type) and dataclasses.is_dataclass(hint):
                value = hint(**value)
            elif get_origin(hint) is tuple:
                value = tuple(value)
            kwargs[f.name] = value
        return cls(**kwargs)
