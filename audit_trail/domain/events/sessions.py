"""Session lifecycle and session-security events raised by the auth module.

The actor of a session event is the authenticated user itself, so these
events carry user_id instead of performed_by.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from audit_trail.domain.events.base import DomainEvent


@dataclass(frozen=True, kw_only=True)
class UserLoggedIn(DomainEvent):
    event_name: ClassVar[str] = "auth.user.logged_in"

    user_id: str
    username: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class UserLoggedOut(DomainEvent):
    event_name: ClassVar[str] = "auth.user.logged_out"

    user_id: str
    username: str | None = None
    revoked_all_tokens: bool = False
    refresh_token_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class RefreshTokenReuseDetected(DomainEvent):
    """A revoked refresh token was presented again; all user tokens were revoked."""

    event_name: ClassVar[str] = "auth.security.refresh_token_reuse_detected"

    user_id: str
    refresh_token_id: str
    token_preview: str
    token_revoked_at: datetime
    all_tokens_revoked: bool = True
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class ExpiredRefreshTokenAttemptDetected(DomainEvent):
    """An expired refresh token was presented."""

    event_name: ClassVar[str] = "auth.security.expired_refresh_token_attempt"

    user_id: str
    token_expired_at: datetime
    token_preview: str
    all_tokens_revoked: bool = True
    refresh_token_id: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None
