"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from audit_trail.shared.telemetry import get_logger, setup_logging
from audit_trail.shared.utils import (
    ensure_utc,
    generate_cuid,
    parse_datetime,
    utc_now,
)

__all__ = [
    "ensure_utc",
    "generate_cuid",
    "get_logger",
    "parse_datetime",
    "setup_logging",
    "utc_now",
]
