"""Translate domain events into audit record creation requests.

One rule per known event class. A rule names the action and entity type and
knows how to pull the actor, the affected entity id, and a small metadata
snapshot out of the event. Anything without a rule, and anything whose actor
or entity id cannot be determined, is skipped (translate() returns None).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from audit_trail.application.dtos.audit_record import AuditRecordCreate
from audit_trail.domain.enums import AuditAction, AuditEntityType
from audit_trail.domain.events import accounts, catalogs, collaborators, documents, sessions
from audit_trail.domain.events.base import DomainEvent

Extractor = Callable[[Any], Any]


@dataclass(frozen=True)
class TranslationRule:
    """How one event class becomes an audit record."""

    action: AuditAction
    entity_type: AuditEntityType
    actor: Extractor
    entity_id: Extractor
    metadata: Extractor | None = None


def _performed_by(event: Any) -> str | None:
    return event.performed_by


def _compact(**values: Any) -> dict[str, Any] | None:
    """Drop None values; an empty snapshot becomes None."""
    out = {k: list(v) if isinstance(v, tuple) else v for k, v in values.items() if v is not None}
    return out or None


def _updated_fields(event: Any) -> tuple[str, ...] | None:
    return event.updated_fields or None


# Accounts


def _user_created_metadata(event: accounts.UserCreated) -> dict[str, Any] | None:
    user = event.user
    return _compact(username=user.username, email=user.email, role=user.role)


def _user_updated_metadata(event: accounts.UserUpdated) -> dict[str, Any] | None:
    return _compact(updated_fields=_updated_fields(event), username=event.user.username)


def _user_id(event: Any) -> str:
    return event.user_id


_ACCOUNT_RULES: dict[type[DomainEvent], TranslationRule] = {
    accounts.UserCreated: TranslationRule(
        AuditAction.CREATE,
        AuditEntityType.USER,
        actor=lambda e: e.performed_by or e.user.created_by,
        entity_id=lambda e: e.user.id,
        metadata=_user_created_metadata,
    ),
    accounts.UserUpdated: TranslationRule(
        AuditAction.UPDATE,
        AuditEntityType.USER,
        actor=_performed_by,
        entity_id=lambda e: e.user.id,
        metadata=_user_updated_metadata,
    ),
    accounts.UserDeleted: TranslationRule(
        AuditAction.DELETE, AuditEntityType.USER, actor=_performed_by, entity_id=_user_id
    ),
    accounts.UserActivated: TranslationRule(
        AuditAction.ACTIVATE, AuditEntityType.USER, actor=_performed_by, entity_id=_user_id
    ),
    accounts.UserDeactivated: TranslationRule(
        AuditAction.DEACTIVATE, AuditEntityType.USER, actor=_performed_by, entity_id=_user_id
    ),
    accounts.UserPasswordChanged: TranslationRule(
        AuditAction.CHANGE_PASSWORD,
        AuditEntityType.USER,
        actor=_performed_by,
        entity_id=_user_id,
    ),
}


# Collaborators


def _collaborator_metadata(event: collaborators.CollaboratorEvent) -> dict[str, Any] | None:
    c = event.collaborator
    return _compact(
        updated_fields=getattr(event, "updated_fields", None) or None,
        first_name=c.first_name,
        last_name=c.last_name,
        employee_number=c.employee_number,
    )


def _collaborator_rule(action: AuditAction, actor: Extractor = _performed_by) -> TranslationRule:
    return TranslationRule(
        action,
        AuditEntityType.COLLABORATOR,
        actor=actor,
        entity_id=lambda e: e.collaborator.id,
        metadata=_collaborator_metadata,
    )


_COLLABORATOR_RULES: dict[type[DomainEvent], TranslationRule] = {
    collaborators.CollaboratorCreated: _collaborator_rule(
        AuditAction.CREATE, actor=lambda e: e.performed_by or e.collaborator.created_by
    ),
    collaborators.CollaboratorUpdated: _collaborator_rule(AuditAction.UPDATE),
    collaborators.CollaboratorDeleted: _collaborator_rule(AuditAction.DELETE),
    collaborators.CollaboratorActivated: _collaborator_rule(AuditAction.ACTIVATE),
    collaborators.CollaboratorDeactivated: _collaborator_rule(AuditAction.DEACTIVATE),
}


# Documents and minutes


def _document_id(event: documents.DocumentEvent) -> str:
    return event.document.id


def _minute_id(event: documents.MinuteEvent) -> str:
    return event.minute.id


_FILE_RULES: dict[type[DomainEvent], TranslationRule] = {
    documents.DocumentCreated: TranslationRule(
        AuditAction.UPLOAD,
        AuditEntityType.DOCUMENT,
        actor=lambda e: e.performed_by or e.document.uploaded_by,
        entity_id=_document_id,
        metadata=lambda e: _compact(
            collaborator_id=e.document.collaborator_id,
            kind=e.document.kind,
            file_name=e.document.file_name,
            file_size=e.document.file_size,
        ),
    ),
    documents.DocumentUpdated: TranslationRule(
        AuditAction.UPDATE,
        AuditEntityType.DOCUMENT,
        actor=_performed_by,
        entity_id=_document_id,
        metadata=lambda e: _compact(
            updated_fields=_updated_fields(e),
            collaborator_id=e.document.collaborator_id,
            kind=e.document.kind,
        ),
    ),
    documents.DocumentDeleted: TranslationRule(
        AuditAction.DELETE,
        AuditEntityType.DOCUMENT,
        actor=_performed_by,
        entity_id=_document_id,
        metadata=lambda e: _compact(
            collaborator_id=e.document.collaborator_id,
            kind=e.document.kind,
            file_name=e.document.file_name,
        ),
    ),
    documents.DocumentDownloaded: TranslationRule(
        AuditAction.DOWNLOAD,
        AuditEntityType.DOCUMENT,
        actor=_performed_by,
        entity_id=_document_id,
        metadata=lambda e: _compact(
            collaborator_id=e.document.collaborator_id,
            file_name=e.document.file_name,
        ),
    ),
    documents.MinuteCreated: TranslationRule(
        AuditAction.UPLOAD,
        AuditEntityType.MINUTE,
        actor=lambda e: e.performed_by or e.minute.uploaded_by,
        entity_id=_minute_id,
        metadata=lambda e: _compact(
            title=e.minute.title,
            minute_type=e.minute.minute_type,
            file_name=e.minute.file_name,
            file_size=e.minute.file_size,
        ),
    ),
    documents.MinuteUpdated: TranslationRule(
        AuditAction.UPDATE,
        AuditEntityType.MINUTE,
        actor=_performed_by,
        entity_id=_minute_id,
        metadata=lambda e: _compact(
            updated_fields=_updated_fields(e),
            title=e.minute.title,
            minute_type=e.minute.minute_type,
        ),
    ),
    documents.MinuteDeleted: TranslationRule(
        AuditAction.DELETE,
        AuditEntityType.MINUTE,
        actor=_performed_by,
        entity_id=_minute_id,
        metadata=lambda e: _compact(
            title=e.minute.title,
            minute_type=e.minute.minute_type,
            file_name=e.minute.file_name,
        ),
    ),
    documents.MinuteDownloaded: TranslationRule(
        AuditAction.DOWNLOAD,
        AuditEntityType.MINUTE,
        actor=_performed_by,
        entity_id=_minute_id,
        metadata=lambda e: _compact(title=e.minute.title, file_name=e.minute.file_name),
    ),
}


# Catalogs: same five verbs over four catalogs


def _catalog_metadata(event: catalogs.CatalogEntryEvent) -> dict[str, Any] | None:
    entry = event.entry
    return _compact(
        updated_fields=getattr(event, "updated_fields", None) or None,
        name=entry.name,
        adscripcion=entry.adscripcion,
        kind=entry.kind,
    )


_CATALOG_VERBS = {
    "Created": AuditAction.CREATE,
    "Updated": AuditAction.UPDATE,
    "Deleted": AuditAction.DELETE,
    "Activated": AuditAction.ACTIVATE,
    "Deactivated": AuditAction.DEACTIVATE,
}

_CATALOG_ENTITIES = {
    "Area": AuditEntityType.AREA,
    "Adscripcion": AuditEntityType.ADSCRIPCION,
    "Puesto": AuditEntityType.PUESTO,
    "DocumentType": AuditEntityType.DOCUMENT_TYPE,
}

_CATALOG_RULES: dict[type[DomainEvent], TranslationRule] = {
    getattr(catalogs, prefix + verb): TranslationRule(
        action,
        entity_type,
        actor=_performed_by,
        entity_id=lambda e: e.entry.id,
        metadata=_catalog_metadata,
    )
    for prefix, entity_type in _CATALOG_ENTITIES.items()
    for verb, action in _CATALOG_VERBS.items()
}


# Sessions: the session's user is both actor and affected entity

_SESSION_RULES: dict[type[DomainEvent], TranslationRule] = {
    sessions.UserLoggedIn: TranslationRule(
        AuditAction.LOGIN,
        AuditEntityType.USER,
        actor=_user_id,
        entity_id=_user_id,
        metadata=lambda e: _compact(
            username=e.username, ip_address=e.ip_address, user_agent=e.user_agent
        ),
    ),
    sessions.UserLoggedOut: TranslationRule(
        AuditAction.LOGOUT,
        AuditEntityType.USER,
        actor=_user_id,
        entity_id=_user_id,
        metadata=lambda e: _compact(
            username=e.username, revoked_all_tokens=e.revoked_all_tokens
        ),
    ),
}

TRANSLATION_RULES: dict[type[DomainEvent], TranslationRule] = {
    **_ACCOUNT_RULES,
    **_COLLABORATOR_RULES,
    **_FILE_RULES,
    **_CATALOG_RULES,
    **_SESSION_RULES,
}

# Known events that are deliberately never audited (security signals go to
# the security log, not the activity trail).
IGNORED_EVENTS: frozenset[type[DomainEvent]] = frozenset(
    {
        sessions.RefreshTokenReuseDetected,
        sessions.ExpiredRefreshTokenAttemptDetected,
    }
)

AUDITED_EVENTS: frozenset[type[DomainEvent]] = frozenset(TRANSLATION_RULES)


def _present(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class AuditEventTranslator:
    """Pure event -> AuditRecordCreate mapping. No I/O, never raises for a well-formed event."""

    def __init__(
        self, rules: dict[type[DomainEvent], TranslationRule] | None = None
    ) -> None:
        self._rules = TRANSLATION_RULES if rules is None else rules

    def rule_for(self, event: DomainEvent) -> TranslationRule | None:
        """Rule for the event's exact class, or None when the event is not audited."""
        return self._rules.get(type(event))

    def translate(self, event: DomainEvent) -> AuditRecordCreate | None:
        """Return a creation request, or None to skip.

        Skips unknown and ignored events, and events whose actor or affected
        entity id is missing or blank. Never substitutes a placeholder actor.
        """
        rule = self.rule_for(event)
        if rule is None:
            return None
        actor_id = _present(rule.actor(event))
        if actor_id is None:
            return None
        entity_id = _present(rule.entity_id(event))
        if entity_id is None:
            return None
        metadata = rule.metadata(event) if rule.metadata is not None else None
        return AuditRecordCreate(
            actor_id=actor_id,
            action=rule.action,
            entity_type=rule.entity_type,
            entity_id=entity_id,
            metadata=metadata,
        )


def unhandled_event_types(
    event_types: list[type[DomainEvent]] | tuple[type[DomainEvent], ...],
    rules: dict[type[DomainEvent], TranslationRule] | None = None,
) -> list[type[DomainEvent]]:
    """Event classes that have neither a translation rule nor an explicit ignore entry."""
    known = set(TRANSLATION_RULES if rules is None else rules) | IGNORED_EVENTS
    return [t for t in event_types if t not in known]
