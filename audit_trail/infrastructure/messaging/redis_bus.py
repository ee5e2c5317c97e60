"""Redis Pub/Sub domain event bus.

Publishes each event as JSON on "<prefix>:<event_name>". A background listener
pattern-subscribes to "<prefix>:*", rebuilds events and hands them to local
subscribers the same way InMemoryEventBus does. Lets processes other than the
publisher (e.g. a dedicated audit worker) receive domain events.

Every process that listens with audit subscriptions on writes its own record
for each event, so exactly one audit worker may run with
AUDIT_SUBSCRIPTIONS_ENABLED=true; other processes run with it off.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

import redis.asyncio as redis

from audit_trail.core.config import Settings, get_settings
from audit_trail.domain.events.base import DomainEvent
from audit_trail.domain.events.registry import event_from_dict
from audit_trail.infrastructure.messaging.in_memory_bus import InMemoryEventBus
from audit_trail.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class RedisEventBus(InMemoryEventBus):
    """IEventBus over Redis Pub/Sub.

    publish() is fire-and-forget: when Redis is unavailable or the publish
    fails, the event is logged and dropped, and the publisher sees no error.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize. Pass redis_client for DI/testing."""
        super().__init__()
        self.settings = settings or get_settings()
        self.redis = redis_client
        self.channel_prefix = self.settings.redis_channel_prefix
        self._connected = redis_client is not None
        self._listener: asyncio.Task[None] | None = None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self._connected:
            return
        if self.redis is None:
            try:
                self.redis = redis.Redis(
                    host=self.settings.redis_host,
                    port=self.settings.redis_port,
                    db=self.settings.redis_db,
                    password=self.settings.redis_password.get_secret_value()
                    if self.settings.redis_password
                    else None,
                    decode_responses=True,
                    socket_connect_timeout=5,
                )
                await self.redis.ping()
                self._connected = True
                logger.info("Redis event bus connected")
            except (redis.ConnectionError, redis.TimeoutError) as e:
                logger.warning("Redis event bus connection failed: %s", e)
                self._connected = False
                self.redis = None

    async def disconnect(self) -> None:
        """Stop the listener and close the Redis connection. Call on app shutdown."""
        await self.stop_listening()
        if self.redis:
            await self.redis.aclose()
            self._connected = False
            logger.info("Redis event bus disconnected")

    def is_available(self) -> bool:
        """Return True if Redis is connected."""
        return self._connected and self.redis is not None

    def channel_for(self, event_name: str) -> str:
        return f"{self.channel_prefix}:{event_name}"

    async def publish(self, event: DomainEvent) -> None:
        if not self.is_available() or self.redis is None:
            logger.warning(
                "Redis not available, dropping event %s (%s)",
                event.event_name,
                event.event_id,
            )
            return
        try:
            await self.redis.publish(
                self.channel_for(event.event_name), json.dumps(event.to_dict())
            )
            logger.debug("Published %s to Redis", event.event_name)
        except Exception:
            logger.exception("Failed to publish event %s", event.event_name)

    def start_listening(self) -> None:
        """Start the background listener task (idempotent)."""
        if self._listener is None or self._listener.done():
            self._listener = asyncio.create_task(self._listen())

    async def stop_listening(self) -> None:
        if self._listener is None:
            return
        self._listener.cancel()
        try:
            await self._listener
        except asyncio.CancelledError:
            pass
        self._listener = None

    def handle_message(self, message: dict[str, Any]) -> DomainEvent | None:
        """Decode one pmessage and dispatch it locally. Returns the event, or None if dropped."""
        if message.get("type") != "pmessage":
            return None
        try:
            event = event_from_dict(json.loads(message["data"]))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError):
            logger.exception(
                "Dropping undecodable event message on %s", message.get("channel")
            )
            return None
        self._dispatch_local(event)
        return event

    async def _listen(self) -> None:
        """Pattern-subscribe and dispatch until cancelled; resubscribe after connection loss."""
        if not self.is_available() or self.redis is None:
            logger.warning("Redis not available, event listener not started")
            return
        pattern = f"{self.channel_prefix}:*"
        delay = self.settings.redis_listener_retry_seconds
        while True:
            pubsub = self.redis.pubsub()
            try:
                await pubsub.psubscribe(pattern)
                logger.info("Subscribed to %s", pattern)
                async for message in pubsub.listen():
                    self.handle_message(message)
                logger.warning("Redis event listener stream ended; resubscribing in %.1fs", delay)
            except asyncio.CancelledError:
                logger.info("Redis event listener cancelled")
                raise
            except (redis.ConnectionError, redis.TimeoutError) as e:
                logger.warning(
                    "Redis event listener lost connection (%s); resubscribing in %.1fs", e, delay
                )
            except Exception:
                logger.exception("Redis event listener error; resubscribing in %.1fs", delay)
            finally:
                await self._close_pubsub(pubsub)
            await asyncio.sleep(delay)

    async def _close_pubsub(self, pubsub: Any) -> None:
        try:
            await pubsub.punsubscribe()
            await pubsub.aclose()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.debug("Ignoring pubsub close error on broken connection: %s", e)
