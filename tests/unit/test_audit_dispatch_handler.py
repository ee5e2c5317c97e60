"""AuditDispatchHandler: translate, ingest, and contain every failure."""

import logging
from unittest.mock import AsyncMock, Mock

from audit_trail.application.event_handlers import AuditDispatchHandler
from audit_trail.application.use_cases.audit import CreateAuditRecordUseCase
from audit_trail.domain.enums import AuditAction, AuditEntityType
from audit_trail.domain.events import (
    CollaboratorCreated,
    CollaboratorSnapshot,
    CollaboratorUpdated,
    RefreshTokenReuseDetected,
    UserLoggedIn,
)
from audit_trail.domain.exceptions import ValidationException
from audit_trail.infrastructure.exceptions import RecordStoreUnavailableError
from audit_trail.shared.utils.datetime import utc_now


def _collaborator_created(actor: str | None = "u1") -> CollaboratorCreated:
    return CollaboratorCreated(
        collaborator=CollaboratorSnapshot(id="c42", first_name="Ana"), performed_by=actor
    )


async def test_handle_creates_one_record(record_repo) -> None:
    handler = AuditDispatchHandler(CreateAuditRecordUseCase(record_repo))
    result = await handler.handle(_collaborator_created())
    assert result is None
    assert len(record_repo) == 1
    page = await record_repo.find_by_entity(AuditEntityType.COLLABORATOR, "c42")
    record = page.records[0]
    assert record.action is AuditAction.CREATE
    assert record.actor_id == "u1"


async def test_skip_does_not_call_ingestion() -> None:
    ingestion = AsyncMock()
    handler = AuditDispatchHandler(ingestion)
    await handler.handle(CollaboratorUpdated(collaborator=CollaboratorSnapshot(id="c42")))
    await handler.handle(
        RefreshTokenReuseDetected(
            user_id="u1", refresh_token_id="rt", token_preview="ab..", token_revoked_at=utc_now()
        )
    )
    ingestion.execute.assert_not_awaited()


async def test_store_failure_is_swallowed_and_logged(caplog) -> None:
    repo = AsyncMock()
    repo.append = AsyncMock(side_effect=RecordStoreUnavailableError("firestore", "timeout"))
    handler = AuditDispatchHandler(CreateAuditRecordUseCase(repo))
    with caplog.at_level(logging.ERROR):
        await handler.handle(_collaborator_created())
    assert "Failed to record audit entry" in caplog.text
    assert "collaborator.created" in caplog.text


async def test_store_failure_leaves_no_record(record_repo) -> None:
    record_repo.append = AsyncMock(side_effect=RecordStoreUnavailableError("memory", "boom"))
    handler = AuditDispatchHandler(CreateAuditRecordUseCase(record_repo))
    await handler.handle(UserLoggedIn(user_id="u1"))
    assert len(record_repo) == 0


async def test_validation_failure_is_swallowed() -> None:
    ingestion = AsyncMock()
    ingestion.execute = AsyncMock(side_effect=ValidationException("bad", field="actor_id"))
    await AuditDispatchHandler(ingestion).handle(_collaborator_created())
    ingestion.execute.assert_awaited_once()


async def test_translator_error_is_swallowed() -> None:
    translator = Mock()
    translator.translate = Mock(side_effect=AttributeError("malformed event"))
    ingestion = AsyncMock()
    await AuditDispatchHandler(ingestion, translator=translator).handle(_collaborator_created())
    ingestion.execute.assert_not_awaited()
