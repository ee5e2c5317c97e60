"""Query use cases: listing filters, paging, sorting, date parsing, narrowing views."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from audit_trail.application.dtos.audit_record import AuditRecordPage
from audit_trail.application.use_cases.audit import (
    GetAuditRecordByIdUseCase,
    GetAuditRecordsByActorUseCase,
    GetAuditRecordsByEntityUseCase,
    ListAuditRecordsUseCase,
)
from audit_trail.domain.entities.audit_record import AuditRecord
from audit_trail.domain.enums import AuditAction, AuditEntityType, SortField, SortOrder
from audit_trail.domain.exceptions import ValidationException

BASE = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


async def _seed(repo, *rows) -> list[AuditRecord]:
    """rows: (actor_id, action, entity_type, entity_id, minutes_after_base)."""
    out = []
    for actor_id, action, entity_type, entity_id, minutes in rows:
        record = AuditRecord.create(
            actor_id=actor_id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            now=BASE + timedelta(minutes=minutes),
        )
        out.append(await repo.append(record))
    return out


@pytest.fixture
async def seeded(record_repo):
    await _seed(
        record_repo,
        ("u1", "create", "collaborator", "c1", 0),
        ("u1", "update", "collaborator", "c1", 1),
        ("u2", "upload", "document", "d1", 2),
        ("u1", "login", "user", "u1", 3),
        ("u3", "delete", "area", "a1", 4),
    )
    return record_repo


class TestListAuditRecords:
    async def test_defaults_newest_first(self, seeded) -> None:
        page = await ListAuditRecordsUseCase(seeded).execute()
        assert page.total == 5
        assert page.limit == 20
        assert page.offset == 0
        times = [r.created_at for r in page.records]
        assert times == sorted(times, reverse=True)

    async def test_limit_one_reports_full_total(self, seeded) -> None:
        page = await ListAuditRecordsUseCase(seeded).execute(actor_id="u1", limit=1, offset=0)
        assert len(page.records) == 1
        assert page.total == 3
        assert page.total_pages == 3

    async def test_actor_filter_returns_only_that_actor(self, seeded) -> None:
        page = await ListAuditRecordsUseCase(seeded).execute(actor_id="u1")
        assert page.records
        assert all(r.actor_id == "u1" for r in page.records)

    async def test_action_and_entity_filters(self, seeded) -> None:
        use_case = ListAuditRecordsUseCase(seeded)
        page = await use_case.execute(action="upload")
        assert [r.entity_id for r in page.records] == ["d1"]
        page = await use_case.execute(entity_type=AuditEntityType.COLLABORATOR, entity_id="c1")
        assert page.total == 2

    async def test_date_range_is_inclusive_and_accepts_strings(self, seeded) -> None:
        page = await ListAuditRecordsUseCase(seeded).execute(
            date_from="2025-01-15T12:01:00Z",
            date_to=BASE + timedelta(minutes=3),
        )
        assert page.total == 3

    async def test_sort_by_action_ascending(self, seeded) -> None:
        page = await ListAuditRecordsUseCase(seeded).execute(
            sort_by="action", sort_order="asc"
        )
        actions = [r.action.value for r in page.records]
        assert actions == sorted(actions)

    async def test_offset_past_end_is_empty(self, seeded) -> None:
        page = await ListAuditRecordsUseCase(seeded).execute(offset=50)
        assert page.records == []
        assert page.total == 5

    @pytest.mark.parametrize(
        ("kwargs", "field"),
        [
            ({"date_from": "yesterday"}, "from"),
            ({"date_to": "2025-13-45"}, "to"),
            ({"action": "archive"}, "action"),
            ({"entity_type": "invoice"}, "entity_type"),
            ({"sort_by": "actor_id"}, "sort_by"),
            ({"sort_order": "sideways"}, "sort_order"),
            ({"limit": 0}, "limit"),
            ({"limit": 101}, "limit"),
            ({"offset": -1}, "offset"),
            ({"date_from": "2025-02-01", "date_to": "2025-01-01"}, "from"),
        ],
    )
    async def test_invalid_input_names_field(self, record_repo, kwargs, field) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await ListAuditRecordsUseCase(record_repo).execute(**kwargs)
        assert exc_info.value.field == field

    async def test_passes_validated_query_to_store(self) -> None:
        repo = AsyncMock()
        repo.query = AsyncMock(return_value=AuditRecordPage(records=[], total=0, limit=20, offset=0))
        await ListAuditRecordsUseCase(repo).execute(
            action="login", date_from="2025-01-01T00:00:00+02:00"
        )
        query = repo.query.await_args.args[0]
        assert query.filters.action is AuditAction.LOGIN
        assert query.filters.date_from == datetime(2024, 12, 31, 22, 0, tzinfo=timezone.utc)
        assert query.sort_by is SortField.CREATED_AT
        assert query.sort_order is SortOrder.DESC

    async def test_blank_optional_filters_mean_no_filter(self, seeded) -> None:
        page = await ListAuditRecordsUseCase(seeded).execute(actor_id="", entity_id="   ")
        assert page.total == 5

    async def test_is_read_only(self, seeded) -> None:
        before = await ListAuditRecordsUseCase(seeded).execute()
        await ListAuditRecordsUseCase(seeded).execute(actor_id="u1", limit=1)
        after = await ListAuditRecordsUseCase(seeded).execute()
        assert before.records == after.records


class TestNarrowingViews:
    async def test_by_entity(self, seeded) -> None:
        page = await GetAuditRecordsByEntityUseCase(seeded).execute("collaborator", "c1")
        assert page.total == 2
        assert [r.action for r in page.records] == [AuditAction.UPDATE, AuditAction.CREATE]

    async def test_by_entity_rejects_unknown_type(self, seeded) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await GetAuditRecordsByEntityUseCase(seeded).execute("invoice", "x")
        assert exc_info.value.field == "entity_type"

    async def test_by_actor_paginates(self, seeded) -> None:
        page = await GetAuditRecordsByActorUseCase(seeded).execute("u1", limit=2, offset=2)
        assert page.total == 3
        assert len(page.records) == 1

    async def test_by_actor_requires_id(self, seeded) -> None:
        with pytest.raises(ValidationException):
            await GetAuditRecordsByActorUseCase(seeded).execute("  ")


class TestGetById:
    async def test_unknown_id_returns_none(self, record_repo) -> None:
        assert await GetAuditRecordByIdUseCase(record_repo).execute("never-issued") is None

    async def test_blank_id_returns_none(self, record_repo) -> None:
        assert await GetAuditRecordByIdUseCase(record_repo).execute("") is None

    async def test_repeated_reads_are_identical(self, seeded) -> None:
        target = (await ListAuditRecordsUseCase(seeded).execute(limit=1)).records[0]
        use_case = GetAuditRecordByIdUseCase(seeded)
        first = await use_case.execute(target.id)
        await _seed(seeded, ("u9", "view", "document", "d9", 10))
        second = await use_case.execute(target.id)
        assert first == second == target
