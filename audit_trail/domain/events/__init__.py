"""Domain events raised by the surrounding modules and consumed by the audit trail."""

from audit_trail.domain.events.accounts import (
    UserActivated,
    UserCreated,
    UserDeactivated,
    UserDeleted,
    UserPasswordChanged,
    UserUpdated,
)
from audit_trail.domain.events.base import DomainEvent
from audit_trail.domain.events.catalogs import (
    AdscripcionActivated,
    AdscripcionCreated,
    AdscripcionDeactivated,
    AdscripcionDeleted,
    AdscripcionUpdated,
    AreaActivated,
    AreaCreated,
    AreaDeactivated,
    AreaDeleted,
    AreaUpdated,
    CatalogEntryEvent,
    DocumentTypeActivated,
    DocumentTypeCreated,
    DocumentTypeDeactivated,
    DocumentTypeDeleted,
    DocumentTypeUpdated,
    PuestoActivated,
    PuestoCreated,
    PuestoDeactivated,
    PuestoDeleted,
    PuestoUpdated,
)
from audit_trail.domain.events.collaborators import (
    CollaboratorActivated,
    CollaboratorCreated,
    CollaboratorDeactivated,
    CollaboratorDeleted,
    CollaboratorUpdated,
)
from audit_trail.domain.events.documents import (
    DocumentCreated,
    DocumentDeleted,
    DocumentDownloaded,
    DocumentUpdated,
    MinuteCreated,
    MinuteDeleted,
    MinuteDownloaded,
    MinuteUpdated,
)
from audit_trail.domain.events.registry import (
    EVENT_TYPES,
    event_from_dict,
    known_event_names,
)
from audit_trail.domain.events.sessions import (
    ExpiredRefreshTokenAttemptDetected,
    RefreshTokenReuseDetected,
    UserLoggedIn,
    UserLoggedOut,
)
from audit_trail.domain.events.snapshots import (
    CatalogEntrySnapshot,
    CollaboratorSnapshot,
    DocumentSnapshot,
    MinuteSnapshot,
    UserSnapshot,
)

__all__ = [
    "EVENT_TYPES",
    "AdscripcionActivated",
    "AdscripcionCreated",
    "AdscripcionDeactivated",
    "AdscripcionDeleted",
    "AdscripcionUpdated",
    "AreaActivated",
    "AreaCreated",
    "AreaDeactivated",
    "AreaDeleted",
    "AreaUpdated",
    "CatalogEntryEvent",
    "CatalogEntrySnapshot",
    "CollaboratorActivated",
    "CollaboratorCreated",
    "CollaboratorDeactivated",
    "CollaboratorDeleted",
    "CollaboratorSnapshot",
    "CollaboratorUpdated",
    "DocumentCreated",
    "DocumentDeleted",
    "DocumentDownloaded",
    "DocumentSnapshot",
    "DocumentTypeActivated",
    "DocumentTypeCreated",
    "DocumentTypeDeactivated",
    "DocumentTypeDeleted",
    "DocumentTypeUpdated",
    "DocumentUpdated",
    "DomainEvent",
    "ExpiredRefreshTokenAttemptDetected",
    "MinuteCreated",
    "MinuteDeleted",
    "MinuteDownloaded",
    "MinuteSnapshot",
    "MinuteUpdated",
    "PuestoActivated",
    "PuestoCreated",
    "PuestoDeactivated",
    "PuestoDeleted",
    "PuestoUpdated",
    "RefreshTokenReuseDetected",
    "UserActivated",
    "UserCreated",
    "UserDeactivated",
    "UserDeleted",
    "UserLoggedIn",
    "UserLoggedOut",
    "UserPasswordChanged",
    "UserSnapshot",
    "UserUpdated",
    "event_from_dict",
    "known_event_names",
]
