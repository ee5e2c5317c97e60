"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (record store,
event bus, audit subscriptions).
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from audit_trail.core.composition import close_audit_module, create_audit_module
from audit_trail.core.config import get_settings
from audit_trail.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: build the audit module (record store, event bus, use cases) and
    apply the subscription policy. Shutdown: drain pending deliveries, close
    bus and store connections.
    """
    settings = get_settings()

    # ---- Startup ----
    module = await create_audit_module(settings)
    app.state.audit = module
    app.state.event_bus = module.event_bus
    logger.info(
        "Audit trail started (store=%s, bus=%s, subscriptions=%d)",
        settings.database_backend,
        settings.event_bus_backend,
        module.subscriptions,
    )

    yield

    # ---- Shutdown ----
    await close_audit_module(module)
    app.state.audit = None
    app.state.event_bus = None
    logger.info("Audit trail shut down")
