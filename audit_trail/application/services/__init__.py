"""Application services: domain event to audit record translation."""

from audit_trail.application.services.event_translator import (
    AUDITED_EVENTS,
    IGNORED_EVENTS,
    TRANSLATION_RULES,
    AuditEventTranslator,
    TranslationRule,
)

__all__ = [
    "AUDITED_EVENTS",
    "IGNORED_EVENTS",
    "TRANSLATION_RULES",
    "AuditEventTranslator",
    "TranslationRule",
]
