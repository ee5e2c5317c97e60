"""Event buses: fire-and-forget delivery and Redis message decoding."""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

from redis.exceptions import ConnectionError as RedisConnectionError

from audit_trail.core.config import Settings
from audit_trail.domain.events import UserLoggedIn
from audit_trail.infrastructure.messaging import InMemoryEventBus, RedisEventBus


class TestInMemoryEventBus:
    async def test_publish_does_not_wait_for_handlers(self, event_bus) -> None:
        started = asyncio.Event()
        release = asyncio.Event()
        received = []

        async def slow_handler(event) -> None:
            started.set()
            await release.wait()
            received.append(event)

        event_bus.subscribe(UserLoggedIn.event_name, slow_handler)
        event = UserLoggedIn(user_id="u1")
        await event_bus.publish(event)
        assert received == []
        await started.wait()
        release.set()
        await event_bus.drain()
        assert received == [event]

    async def test_handler_errors_never_reach_publisher(self, event_bus, caplog) -> None:
        async def broken(event) -> None:
            raise RuntimeError("audit store down")

        event_bus.subscribe(UserLoggedIn.event_name, broken)
        await event_bus.publish(UserLoggedIn(user_id="u1"))
        await event_bus.drain()
        assert "audit store down" in caplog.text

    async def test_subscribe_is_idempotent(self, event_bus) -> None:
        handler = AsyncMock()
        event_bus.subscribe("auth.user.logged_in", handler)
        event_bus.subscribe("auth.user.logged_in", handler)
        assert event_bus.handler_count("auth.user.logged_in") == 1
        await event_bus.publish(UserLoggedIn(user_id="u1"))
        await event_bus.drain()
        handler.assert_awaited_once()

    async def test_unsubscribe(self, event_bus) -> None:
        handler = AsyncMock()
        event_bus.subscribe("auth.user.logged_in", handler)
        event_bus.unsubscribe("auth.user.logged_in", handler)
        await event_bus.publish(UserLoggedIn(user_id="u1"))
        await event_bus.drain()
        handler.assert_not_awaited()
        assert event_bus.handler_count() == 0

    async def test_only_matching_name_is_delivered(self, event_bus) -> None:
        handler = AsyncMock()
        event_bus.subscribe("auth.user.logged_out", handler)
        await event_bus.publish(UserLoggedIn(user_id="u1"))
        await event_bus.drain()
        handler.assert_not_awaited()


def _redis_settings() -> Settings:
    return Settings(database_backend="memory", event_bus_backend="redis")


class TestRedisEventBus:
    async def test_publish_serializes_to_event_channel(self) -> None:
        redis_client = AsyncMock()
        bus = RedisEventBus(redis_client=redis_client, settings=_redis_settings())
        event = UserLoggedIn(user_id="u1", ip_address="10.0.0.1")
        await bus.publish(event)
        channel, payload = redis_client.publish.await_args.args
        assert channel == "domain_events:auth.user.logged_in"
        assert json.loads(payload)["user_id"] == "u1"

    async def test_publish_without_redis_is_silent(self, caplog) -> None:
        bus = RedisEventBus(settings=_redis_settings())
        await bus.publish(UserLoggedIn(user_id="u1"))
        assert "Redis not available" in caplog.text

    async def test_publish_error_is_logged_not_raised(self) -> None:
        redis_client = AsyncMock()
        redis_client.publish = AsyncMock(side_effect=ConnectionError("reset"))
        bus = RedisEventBus(redis_client=redis_client, settings=_redis_settings())
        await bus.publish(UserLoggedIn(user_id="u1"))

    async def test_incoming_message_reaches_local_subscribers(self) -> None:
        bus = RedisEventBus(redis_client=AsyncMock(), settings=_redis_settings())
        handler = AsyncMock()
        bus.subscribe("auth.user.logged_in", handler)
        event = UserLoggedIn(user_id="u1")
        decoded = bus.handle_message(
            {
                "type": "pmessage",
                "channel": "domain_events:auth.user.logged_in",
                "data": json.dumps(event.to_dict()),
            }
        )
        await bus.drain()
        assert decoded == event
        handler.assert_awaited_once_with(event)

    async def test_undecodable_messages_are_dropped(self) -> None:
        bus = RedisEventBus(redis_client=AsyncMock(), settings=_redis_settings())
        assert bus.handle_message({"type": "pmessage", "channel": "x", "data": "{not json"}) is None
        assert (
            bus.handle_message(
                {"type": "pmessage", "channel": "x", "data": json.dumps({"event_name": "nope"})}
            )
            is None
        )
        assert bus.handle_message({"type": "psubscribe", "data": 1}) is None


class _ScriptedPubSub:
    """Pubsub stand-in: yields the given messages, then fails or blocks until cancelled."""

    def __init__(self, messages: list[dict], error: Exception | None = None) -> None:
        self._messages = messages
        self._error = error
        self.psubscribe = AsyncMock()
        self.punsubscribe = AsyncMock()
        self.aclose = AsyncMock()

    async def listen(self):
        for message in self._messages:
            yield message
        if self._error is not None:
            raise self._error
        await asyncio.Event().wait()


class TestRedisListener:
    async def test_resubscribes_after_connection_loss(self) -> None:
        event = UserLoggedIn(user_id="u1")
        broken = _ScriptedPubSub([], error=RedisConnectionError("connection reset"))
        healthy = _ScriptedPubSub(
            [
                {
                    "type": "pmessage",
                    "channel": "domain_events:auth.user.logged_in",
                    "data": json.dumps(event.to_dict()),
                }
            ]
        )
        redis_client = MagicMock()
        redis_client.pubsub.side_effect = [broken, healthy]
        settings = Settings(
            database_backend="memory",
            event_bus_backend="redis",
            redis_listener_retry_seconds=0,
        )
        bus = RedisEventBus(redis_client=redis_client, settings=settings)
        handler = AsyncMock()
        bus.subscribe("auth.user.logged_in", handler)

        bus.start_listening()
        for _ in range(200):
            if handler.await_count:
                break
            await asyncio.sleep(0.01)
        await bus.stop_listening()

        handler.assert_awaited_once_with(event)
        assert redis_client.pubsub.call_count == 2
        broken.aclose.assert_awaited_once()
        healthy.psubscribe.assert_awaited_once_with("domain_events:*")
        healthy.aclose.assert_awaited_once()
