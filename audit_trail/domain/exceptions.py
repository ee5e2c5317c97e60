"""Domain exceptions for the audit trail.

Defines domain-level exceptions that represent rule violations. These
exceptions are independent of infrastructure concerns. The presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class AuditTrailException(Exception):
    """Base exception for all audit trail errors.

    All custom exceptions inherit from this class to allow consistent
    error handling and logging. Presentation layer maps these to HTTP
    responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, record_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(AuditTrailException):
    """Raised when input validation fails (missing field, value outside a closed set, bad date)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)

    @property
    def field(self) -> str | None:
        """Name of the offending field, if known."""
        return self.details.get("field")


class AuditRecordNotFoundException(AuditTrailException):
    """Raised by the HTTP adapter when a requested audit record does not exist.

    The query use case itself returns None for a missing id; only the
    presentation layer turns absence into an error.
    """

    def __init__(self, record_id: str) -> None:
        super().__init__(
            f"Audit record not found: {record_id}",
            "RECORD_NOT_FOUND",
            {"record_id": record_id},
        )
