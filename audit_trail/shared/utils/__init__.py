"""Shared utilities: datetime and id generators."""

from audit_trail.shared.utils.datetime import (
    ensure_utc,
    parse_datetime,
    utc_now,
)
from audit_trail.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "parse_datetime",
]
