"""Pytest configuration and fixtures for the audit trail.

The app runs against the in-memory record store and in-memory event bus.
Environment is set before audit_trail.main is imported so create_app() sees it.
"""

import os

os.environ["DATABASE_BACKEND"] = "memory"
os.environ["EVENT_BUS_BACKEND"] = "memory"
os.environ["AUDIT_SUBSCRIPTIONS_ENABLED"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from audit_trail.core.composition import AuditModule  # noqa: E402
from audit_trail.core.config import Settings, get_settings  # noqa: E402
from audit_trail.infrastructure.memory import InMemoryAuditRecordRepository  # noqa: E402
from audit_trail.infrastructure.messaging import InMemoryEventBus  # noqa: E402

get_settings.cache_clear()

from audit_trail.main import create_app  # noqa: E402


@pytest.fixture
def memory_settings() -> Settings:
    """Memory backends with audit subscriptions on (explicit, not from env)."""
    return Settings(
        database_backend="memory",
        event_bus_backend="memory",
        audit_subscriptions_enabled=True,
    )


@pytest.fixture
def record_repo() -> InMemoryAuditRecordRepository:
    return InMemoryAuditRecordRepository()


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def audit_module(
    memory_settings: Settings,
    record_repo: InMemoryAuditRecordRepository,
    event_bus: InMemoryEventBus,
) -> AuditModule:
    """Fully wired module: dispatch handler subscribed to every known event."""
    return AuditModule.build(record_repo, event_bus, memory_settings)


@pytest.fixture
async def client(audit_module: AuditModule) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI).

    ASGITransport does not run the lifespan, so the module is attached to
    app.state directly.
    """
    app = create_app()
    app.state.audit = audit_module
    app.state.event_bus = audit_module.event_bus
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
