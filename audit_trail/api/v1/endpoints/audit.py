"""Audit record API: read-only views over the audit trail.

There is no create, update or delete route. Records are written only by the
dispatch handler in response to domain events.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from audit_trail.api.v1.dependencies import (
    get_list_records_use_case,
    get_record_by_id_use_case,
    get_records_by_actor_use_case,
    get_records_by_entity_use_case,
)
from audit_trail.application.use_cases.audit import (
    GetAuditRecordByIdUseCase,
    GetAuditRecordsByActorUseCase,
    GetAuditRecordsByEntityUseCase,
    ListAuditRecordsUseCase,
)
from audit_trail.domain.exceptions import AuditRecordNotFoundException
from audit_trail.schemas.audit import (
    AuditRecordDetailResponse,
    AuditRecordListResponse,
    AuditRecordResponse,
)

router = APIRouter()


@router.get("", response_model=AuditRecordListResponse)
async def list_audit_records(
    use_case: Annotated[ListAuditRecordsUseCase, Depends(get_list_records_use_case)],
    actor_id: str | None = Query(None, description="Filter by actor"),
    action: str | None = Query(None, description="Filter by action"),
    entity_type: str | None = Query(None, description="Filter by affected entity type"),
    entity_id: str | None = Query(None, description="Filter by affected entity id"),
    date_from: str | None = Query(None, alias="from", description="From (inclusive) ISO8601"),
    date_to: str | None = Query(None, alias="to", description="To (inclusive) ISO8601"),
    limit: int | None = Query(None, description="Page size (1-100, default 20)"),
    offset: int | None = Query(None, description="Records to skip (default 0)"),
    sort_by: str | None = Query(None, description="created_at, action or entity_type"),
    sort_order: str | None = Query(None, description="asc or desc (default desc)"),
):
    """List audit records (filtered, sorted, paginated) with the total match count."""
    page = await use_case.execute(
        actor_id=actor_id,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
        offset=offset,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return AuditRecordListResponse.from_page(page)


@router.get("/entity/{entity_type}/{entity_id}", response_model=AuditRecordListResponse)
async def list_audit_records_for_entity(
    entity_type: str,
    entity_id: str,
    use_case: Annotated[
        GetAuditRecordsByEntityUseCase, Depends(get_records_by_entity_use_case)
    ],
    limit: int | None = Query(None),
    offset: int | None = Query(None),
):
    """History of one affected object, newest first."""
    page = await use_case.execute(entity_type, entity_id, limit=limit, offset=offset)
    return AuditRecordListResponse.from_page(page)


@router.get("/actor/{actor_id}", response_model=AuditRecordListResponse)
async def list_audit_records_for_actor(
    actor_id: str,
    use_case: Annotated[
        GetAuditRecordsByActorUseCase, Depends(get_records_by_actor_use_case)
    ],
    limit: int | None = Query(None),
    offset: int | None = Query(None),
):
    """Activity of one actor, newest first."""
    page = await use_case.execute(actor_id, limit=limit, offset=offset)
    return AuditRecordListResponse.from_page(page)


@router.get("/{record_id}", response_model=AuditRecordDetailResponse)
async def get_audit_record(
    record_id: str,
    use_case: Annotated[GetAuditRecordByIdUseCase, Depends(get_record_by_id_use_case)],
):
    """Return one audit record; 404 when the id was never issued."""
    record = await use_case.execute(record_id)
    if record is None:
        raise AuditRecordNotFoundException(record_id)
    return AuditRecordDetailResponse(data=AuditRecordResponse.from_record(record))
