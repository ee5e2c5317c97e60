"""CreateAuditRecordUseCase: validation, persistence, non-idempotence."""

from unittest.mock import AsyncMock

import pytest

from audit_trail.application.dtos.audit_record import AuditRecordCreate
from audit_trail.application.use_cases.audit import (
    CreateAuditRecordUseCase,
    GetAuditRecordByIdUseCase,
)
from audit_trail.domain.enums import AuditAction, AuditEntityType
from audit_trail.domain.exceptions import ValidationException
from audit_trail.infrastructure.exceptions import RecordStoreUnavailableError


def _request(**overrides) -> AuditRecordCreate:
    data = {
        "actor_id": "u1",
        "action": AuditAction.CREATE,
        "entity_type": AuditEntityType.COLLABORATOR,
        "entity_id": "c42",
        "metadata": {"first_name": "Ana"},
    }
    data.update(overrides)
    return AuditRecordCreate(**data)


async def test_create_persists_and_returns_record(record_repo) -> None:
    record = await CreateAuditRecordUseCase(record_repo).execute(_request())
    assert record.actor_id == "u1"
    assert record.entity_id == "c42"
    assert len(record_repo) == 1


async def test_same_payload_twice_yields_two_records(record_repo) -> None:
    use_case = CreateAuditRecordUseCase(record_repo)
    first = await use_case.execute(_request())
    second = await use_case.execute(_request())
    assert first.id != second.id
    assert len(record_repo) == 2


async def test_round_trip_through_get_by_id(record_repo) -> None:
    created = await CreateAuditRecordUseCase(record_repo).execute(_request())
    fetched = await GetAuditRecordByIdUseCase(record_repo).execute(created.id)
    assert fetched == created


async def test_accepts_raw_strings(record_repo) -> None:
    record = await CreateAuditRecordUseCase(record_repo).execute(
        _request(action="download", entity_type="document")
    )
    assert record.action is AuditAction.DOWNLOAD
    assert record.entity_type is AuditEntityType.DOCUMENT


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"actor_id": " "}, "actor_id"),
        ({"entity_id": ""}, "entity_id"),
        ({"action": "archive"}, "action"),
        ({"entity_type": "invoice"}, "entity_type"),
    ],
)
async def test_invalid_request_is_rejected_loudly(record_repo, overrides, field) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await CreateAuditRecordUseCase(record_repo).execute(_request(**overrides))
    assert exc_info.value.field == field
    assert len(record_repo) == 0


async def test_store_failure_propagates_to_direct_caller() -> None:
    repo = AsyncMock()
    repo.append = AsyncMock(side_effect=RecordStoreUnavailableError("firestore", "timeout"))
    with pytest.raises(RecordStoreUnavailableError):
        await CreateAuditRecordUseCase(repo).execute(_request())
