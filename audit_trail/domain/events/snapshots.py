"""Snapshots of domain objects carried on events.

Only the identifying fields audit needs; never credentials or file contents.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserSnapshot:
    id: str
    username: str | None = None
    email: str | None = None
    role: str | None = None
    created_by: str | None = None


@dataclass(frozen=True)
class CollaboratorSnapshot:
    id: str
    first_name: str | None = None
    last_name: str | None = None
    employee_number: str | None = None
    created_by: str | None = None


@dataclass(frozen=True)
class DocumentSnapshot:
    """A file attached to a collaborator's personnel record."""

    id: str
    collaborator_id: str | None = None
    kind: str | None = None
    file_name: str | None = None
    file_size: int | None = None
    uploaded_by: str | None = None


@dataclass(frozen=True)
class MinuteSnapshot:
    """A minute (record bundle) file."""

    id: str
    title: str | None = None
    minute_type: str | None = None
    file_name: str | None = None
    file_size: int | None = None
    uploaded_by: str | None = None


@dataclass(frozen=True)
class CatalogEntrySnapshot:
    """Entry of one of the catalogs (area, adscripcion, puesto, document type).

    adscripcion is only set on sub-division entries; kind only on document types.
    """

    id: str
    name: str | None = None
    adscripcion: str | None = None
    kind: str | None = None
