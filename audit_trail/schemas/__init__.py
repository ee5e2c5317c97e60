"""API request/response schemas (pydantic)."""

from audit_trail.schemas.audit import (
    AuditRecordDetailResponse,
    AuditRecordListResponse,
    AuditRecordResponse,
    PaginationResponse,
)
from audit_trail.schemas.health import HealthResponse

__all__ = [
    "AuditRecordDetailResponse",
    "AuditRecordListResponse",
    "AuditRecordResponse",
    "HealthResponse",
    "PaginationResponse",
]
