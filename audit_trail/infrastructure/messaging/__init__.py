"""Messaging: domain event bus adapters (in-process and Redis Pub/Sub)."""

from audit_trail.infrastructure.messaging.in_memory_bus import InMemoryEventBus
from audit_trail.infrastructure.messaging.redis_bus import RedisEventBus

__all__ = [
    "InMemoryEventBus",
    "RedisEventBus",
]
