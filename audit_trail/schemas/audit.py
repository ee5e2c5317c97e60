"""Response schemas for the audit record API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from audit_trail.application.dtos.audit_record import AuditRecordPage
from audit_trail.domain.entities.audit_record import AuditRecord


class AuditRecordResponse(BaseModel):
    """Single audit record (read). Same shape as the stored record."""

    id: str
    actor_id: str
    action: str
    entity_type: str
    entity_id: str
    metadata: dict[str, Any] | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: AuditRecord) -> "AuditRecordResponse":
        return cls.model_validate(record.to_dict())


class PaginationResponse(BaseModel):
    total: int = Field(..., ge=0, description="Records matching the filters, ignoring paging")
    limit: int
    offset: int
    total_pages: int


class AuditRecordListResponse(BaseModel):
    """Paginated list of audit records."""

    data: list[AuditRecordResponse]
    pagination: PaginationResponse

    @classmethod
    def from_page(cls, page: AuditRecordPage) -> "AuditRecordListResponse":
        return cls(
            data=[AuditRecordResponse.from_record(r) for r in page.records],
            pagination=PaginationResponse(
                total=page.total,
                limit=page.limit,
                offset=page.offset,
                total_pages=page.total_pages,
            ),
        )


class AuditRecordDetailResponse(BaseModel):
    data: AuditRecordResponse
