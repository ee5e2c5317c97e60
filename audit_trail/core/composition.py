"""Composition root for the audit trail: store, bus, use cases, dispatch handler.

Built once at startup from Settings and kept on app.state. Nothing in the
application layer reaches for a global bus or store; everything is handed in
from here.
"""

from __future__ import annotations

from dataclasses import dataclass

from audit_trail.application.event_handlers.audit_dispatch_handler import (
    AuditDispatchHandler,
)
from audit_trail.application.interfaces.repositories import IAuditRecordRepository
from audit_trail.application.interfaces.services import IEventBus
from audit_trail.application.use_cases.audit import (
    CreateAuditRecordUseCase,
    GetAuditRecordByIdUseCase,
    GetAuditRecordsByActorUseCase,
    GetAuditRecordsByEntityUseCase,
    ListAuditRecordsUseCase,
)
from audit_trail.core.config import Settings, get_settings
from audit_trail.domain.events.registry import known_event_names
from audit_trail.infrastructure.exceptions import RecordStoreUnavailableError
from audit_trail.infrastructure.messaging.in_memory_bus import InMemoryEventBus
from audit_trail.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def register_audit_subscriptions(
    bus: IEventBus,
    handler: AuditDispatchHandler,
    enabled: bool,
    event_names: list[str] | None = None,
) -> int:
    """Subscribe handler.handle once to every known event name.

    When enabled is False nothing is subscribed, so publishing events never
    produces audit records. Returns the number of subscriptions made.
    """
    if not enabled:
        logger.info("Audit subscriptions disabled; domain events will not be recorded")
        return 0
    names = known_event_names() if event_names is None else event_names
    for name in names:
        bus.subscribe(name, handler.handle)
    logger.info("Audit dispatch handler subscribed to %d event types", len(names))
    return len(names)


@dataclass
class AuditModule:
    """Everything the audit trail needs at runtime, wired together."""

    settings: Settings
    record_repo: IAuditRecordRepository
    event_bus: IEventBus
    create_record: CreateAuditRecordUseCase
    get_record: GetAuditRecordByIdUseCase
    list_records: ListAuditRecordsUseCase
    records_by_entity: GetAuditRecordsByEntityUseCase
    records_by_actor: GetAuditRecordsByActorUseCase
    dispatch_handler: AuditDispatchHandler
    subscriptions: int = 0

    @classmethod
    def build(
        cls,
        record_repo: IAuditRecordRepository,
        event_bus: IEventBus,
        settings: Settings | None = None,
    ) -> AuditModule:
        """Wire use cases and handler around the given store and bus, then apply the subscription policy."""
        settings = settings or get_settings()
        page_args = {
            "default_limit": settings.audit_default_page_size,
            "max_limit": settings.audit_max_page_size,
        }
        create_record = CreateAuditRecordUseCase(record_repo)
        handler = AuditDispatchHandler(create_record)
        module = cls(
            settings=settings,
            record_repo=record_repo,
            event_bus=event_bus,
            create_record=create_record,
            get_record=GetAuditRecordByIdUseCase(record_repo),
            list_records=ListAuditRecordsUseCase(record_repo, **page_args),
            records_by_entity=GetAuditRecordsByEntityUseCase(record_repo, **page_args),
            records_by_actor=GetAuditRecordsByActorUseCase(record_repo, **page_args),
            dispatch_handler=handler,
        )
        module.subscriptions = register_audit_subscriptions(
            event_bus, handler, settings.audit_subscriptions_enabled
        )
        return module


def build_record_repo(settings: Settings) -> IAuditRecordRepository:
    """Record store for settings.database_backend.

    Raises:
        RecordStoreUnavailableError: Firestore selected but the client could not be initialized.
    """
    if settings.database_backend == "memory":
        from audit_trail.infrastructure.memory.audit_record_repo import (
            InMemoryAuditRecordRepository,
        )

        logger.warning("Using in-memory audit record store; history is lost on restart")
        return InMemoryAuditRecordRepository()

    from audit_trail.infrastructure.firebase.client import (
        get_firestore_client,
        init_firebase,
    )
    from audit_trail.infrastructure.firebase.repositories import (
        FirestoreAuditRecordRepository,
    )

    if not init_firebase(settings):
        raise RecordStoreUnavailableError("firestore", "client initialization failed")
    client = get_firestore_client()
    if client is None:
        raise RecordStoreUnavailableError("firestore", "client not initialized")
    return FirestoreAuditRecordRepository(client)


async def build_event_bus(settings: Settings) -> IEventBus:
    """Event bus for settings.event_bus_backend. The Redis bus is connected and listening."""
    if settings.event_bus_backend == "redis":
        from audit_trail.infrastructure.messaging.redis_bus import RedisEventBus

        bus = RedisEventBus(settings=settings)
        await bus.connect()
        bus.start_listening()
        return bus
    return InMemoryEventBus()


async def create_audit_module(settings: Settings | None = None) -> AuditModule:
    """Build the full module from settings (used by the app lifespan)."""
    settings = settings or get_settings()
    record_repo = build_record_repo(settings)
    event_bus = await build_event_bus(settings)
    return AuditModule.build(record_repo, event_bus, settings)


async def close_audit_module(module: AuditModule) -> None:
    """Flush in-flight deliveries, then release bus and store connections."""
    bus = module.event_bus
    if isinstance(bus, InMemoryEventBus):
        await bus.drain()
    disconnect = getattr(bus, "disconnect", None)
    if disconnect is not None:
        await disconnect()
    if module.settings.database_backend == "firestore":
        from audit_trail.infrastructure.firebase.client import close_firebase

        await close_firebase()
