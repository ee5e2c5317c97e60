"""Audit record queries (read-only): by id, filtered listing, by entity, by actor."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TypeVar

from audit_trail.application.dtos.audit_record import (
    AuditRecordFilters,
    AuditRecordPage,
    AuditRecordQuery,
)
from audit_trail.application.interfaces.repositories import IAuditRecordRepository
from audit_trail.domain.entities.audit_record import AuditRecord
from audit_trail.domain.enums import AuditAction, AuditEntityType, SortField, SortOrder
from audit_trail.domain.exceptions import ValidationException
from audit_trail.shared.telemetry.logging import get_logger
from audit_trail.shared.utils.datetime import parse_datetime

logger = get_logger(__name__)

DEFAULT_LIMIT = 20
DEFAULT_OFFSET = 0
MAX_LIMIT = 100

E = TypeVar("E", bound=Enum)


def _coerce_enum(enum_cls: type[E], value: E | str | None, field: str) -> E | None:
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationException(
            f"Invalid {field}: {value!r}. Expected one of: {allowed}", field=field
        ) from e


def _coerce_date(value: datetime | str | None, field: str) -> datetime | None:
    if value is None:
        return None
    try:
        return parse_datetime(value)
    except (TypeError, ValueError) as e:
        raise ValidationException(
            f"Invalid {field} date: {value!r}. Expected ISO8601 (e.g. 2024-01-15T12:00:00Z).",
            field=field,
        ) from e


def _optional_id(value: str | None) -> str | None:
    """Trimmed filter value; blank means no filter."""
    if value is None:
        return None
    return value.strip() or None


def _required_id(value: str | None, field: str) -> str:
    checked = _optional_id(value)
    if checked is None:
        raise ValidationException(f"{field} is required", field=field)
    return checked


class _PagingMixin:
    """Shared limit/offset validation. limit defaults to default_limit, capped at max_limit."""

    default_limit: int = DEFAULT_LIMIT
    max_limit: int = MAX_LIMIT

    def _paging(self, limit: int | None, offset: int | None) -> tuple[int, int]:
        limit = self.default_limit if limit is None else limit
        offset = DEFAULT_OFFSET if offset is None else offset
        if limit < 1 or limit > self.max_limit:
            raise ValidationException(
                f"limit must be between 1 and {self.max_limit}", field="limit"
            )
        if offset < 0:
            raise ValidationException("offset must be >= 0", field="offset")
        return limit, offset


class GetAuditRecordByIdUseCase:
    """Fetch one record. A missing id is an absence (None), not an error."""

    def __init__(self, record_repo: IAuditRecordRepository) -> None:
        self._record_repo = record_repo

    async def execute(self, record_id: str) -> AuditRecord | None:
        if not record_id or not record_id.strip():
            return None
        return await self._record_repo.get_by_id(record_id.strip())


class ListAuditRecordsUseCase(_PagingMixin):
    """Filtered, sorted, paginated listing with total match count."""

    def __init__(
        self,
        record_repo: IAuditRecordRepository,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> None:
        self._record_repo = record_repo
        self.default_limit = default_limit
        self.max_limit = max_limit

    async def execute(
        self,
        *,
        actor_id: str | None = None,
        action: AuditAction | str | None = None,
        entity_type: AuditEntityType | str | None = None,
        entity_id: str | None = None,
        date_from: datetime | str | None = None,
        date_to: datetime | str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        sort_by: SortField | str | None = None,
        sort_order: SortOrder | str | None = None,
    ) -> AuditRecordPage:
        """Return matching records and total.

        Date bounds are inclusive and accept a datetime or an ISO-8601 string.
        Raises ValidationException naming the offending field (action,
        entity_type, from, to, limit, offset, sort_by, sort_order).
        """
        start = _coerce_date(date_from, "from")
        end = _coerce_date(date_to, "to")
        if start is not None and end is not None and start > end:
            raise ValidationException("from must not be later than to", field="from")
        filters = AuditRecordFilters(
            actor_id=_optional_id(actor_id),
            action=_coerce_enum(AuditAction, action, "action"),
            entity_type=_coerce_enum(AuditEntityType, entity_type, "entity_type"),
            entity_id=_optional_id(entity_id),
            date_from=start,
            date_to=end,
        )
        limit, offset = self._paging(limit, offset)
        query = AuditRecordQuery(
            filters=filters,
            limit=limit,
            offset=offset,
            sort_by=_coerce_enum(SortField, sort_by, "sort_by") or SortField.CREATED_AT,
            sort_order=_coerce_enum(SortOrder, sort_order, "sort_order") or SortOrder.DESC,
        )
        page = await self._record_repo.query(query)
        logger.debug(
            "Listed %d of %d audit records (limit=%d, offset=%d)",
            len(page.records),
            page.total,
            limit,
            offset,
        )
        return page


class GetAuditRecordsByEntityUseCase(_PagingMixin):
    """History of one affected object, newest first."""

    def __init__(
        self,
        record_repo: IAuditRecordRepository,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> None:
        self._record_repo = record_repo
        self.default_limit = default_limit
        self.max_limit = max_limit

    async def execute(
        self,
        entity_type: AuditEntityType | str,
        entity_id: str,
        limit: int | None = None,
        offset: int | None = None,
    ) -> AuditRecordPage:
        kind = _coerce_enum(AuditEntityType, entity_type, "entity_type")
        if kind is None:
            raise ValidationException("entity_type is required", field="entity_type")
        limit, offset = self._paging(limit, offset)
        return await self._record_repo.find_by_entity(
            kind, _required_id(entity_id, "entity_id"), limit=limit, offset=offset
        )


class GetAuditRecordsByActorUseCase(_PagingMixin):
    """Activity of one actor, newest first."""

    def __init__(
        self,
        record_repo: IAuditRecordRepository,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> None:
        self._record_repo = record_repo
        self.default_limit = default_limit
        self.max_limit = max_limit

    async def execute(
        self, actor_id: str, limit: int | None = None, offset: int | None = None
    ) -> AuditRecordPage:
        limit, offset = self._paging(limit, offset)
        return await self._record_repo.find_by_actor(
            _required_id(actor_id, "actor_id"), limit=limit, offset=offset
        )
