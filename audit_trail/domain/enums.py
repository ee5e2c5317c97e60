"""Domain enumerations for the audit trail.

Closed sets: an audit record can only carry an action and an entity type
that appear here. Membership is checked when a record is constructed.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds values() and has_value() classmethods to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]

    @classmethod
    def has_value(cls, value: object) -> bool:
        """Return True if value is a member or a member's string value."""
        return value in cls.values()


class AuditAction(_ValuesMixin, str, Enum):
    """What the actor did to the affected entity."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    UPLOAD = "upload"
    DOWNLOAD = "download"
    VIEW = "view"
    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"
    LOGIN = "login"
    LOGOUT = "logout"
    REFRESH_TOKEN = "refresh_token"
    CHANGE_PASSWORD = "change_password"


class AuditEntityType(_ValuesMixin, str, Enum):
    """Kind of object an audited action was performed on."""

    USER = "user"
    COLLABORATOR = "collaborator"
    DOCUMENT = "document"
    MINUTE = "minute"
    AREA = "area"
    ADSCRIPCION = "adscripcion"
    PUESTO = "puesto"
    DOCUMENT_TYPE = "document_type"


class SortField(_ValuesMixin, str, Enum):
    """Fields a record listing may be ordered by."""

    CREATED_AT = "created_at"
    ACTION = "action"
    ENTITY_TYPE = "entity_type"


class SortOrder(_ValuesMixin, str, Enum):
    """Listing direction."""

    ASC = "asc"
    DESC = "desc"
