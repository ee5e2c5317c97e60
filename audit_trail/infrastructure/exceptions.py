"""Infrastructure exceptions for record store operations.

Store errors extend AuditTrailException so presentation can map them
to HTTP responses consistently.
"""

from audit_trail.domain.exceptions import AuditTrailException


class RecordStoreException(AuditTrailException):
    """Base exception for record store operations."""


class RecordStoreUnavailableError(RecordStoreException):
    """Store not configured or unreachable (timeout, connection failure)."""

    def __init__(self, backend: str, reason: str) -> None:
        super().__init__(
            f"Record store '{backend}' unavailable: {reason}",
            "RECORD_STORE_UNAVAILABLE",
            {"backend": backend, "reason": reason},
        )


class RecordStoreWriteError(RecordStoreException):
    """Append was rejected by the store."""

    def __init__(self, record_id: str, reason: str) -> None:
        super().__init__(
            f"Failed to append audit record: {record_id}",
            "RECORD_STORE_WRITE_ERROR",
            {"record_id": record_id, "reason": reason},
        )


class RecordStoreReadError(RecordStoreException):
    """Read or query was rejected by the store (e.g. missing composite index)."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"Record store {operation} failed",
            "RECORD_STORE_READ_ERROR",
            {"operation": operation, "reason": reason},
        )


class RecordAlreadyExistsError(RecordStoreException):
    """An append reused an existing record id. Records are never overwritten."""

    def __init__(self, record_id: str) -> None:
        super().__init__(
            f"Audit record already exists: {record_id}",
            "RECORD_ALREADY_EXISTS",
            {"record_id": record_id},
        )
