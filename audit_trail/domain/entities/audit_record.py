"""Audit record domain entity.

One completed, attributable action. Records are append-only: the entity is
frozen, has no mutators, and updated_at always equals created_at.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from collections.abc import Mapping
from typing import Any

from audit_trail.domain.enums import AuditAction, AuditEntityType
from audit_trail.domain.exceptions import ValidationException
from audit_trail.shared.utils.datetime import ensure_utc, utc_now
from audit_trail.shared.utils.generators import generate_cuid


def _required_id(value: Any, field_name: str, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationException(f"{label} is required", field=field_name)
    return value.strip()


def _coerce_action(value: Any) -> AuditAction:
    if isinstance(value, AuditAction):
        return value
    if not AuditAction.has_value(value):
        raise ValidationException(
            f"action must be one of: {', '.join(AuditAction.values())}",
            field="action",
        )
    return AuditAction(value)


def _coerce_entity_type(value: Any) -> AuditEntityType:
    if isinstance(value, AuditEntityType):
        return value
    if not AuditEntityType.has_value(value):
        raise ValidationException(
            f"entity_type must be one of: {', '.join(AuditEntityType.values())}",
            field="entity_type",
        )
    return AuditEntityType(value)


_SCALARS = (str, bool, int, float, bytes, datetime)


def _check_metadata_value(value: Any, path: str) -> None:
    """Only values every record store can persist: scalars, lists and string-keyed maps."""
    if value is None or isinstance(value, _SCALARS):
        return
    if isinstance(value, list | tuple):
        for i, item in enumerate(value):
            _check_metadata_value(item, f"{path}[{i}]")
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            if not isinstance(key, str):
                raise ValidationException(
                    f"metadata keys must be strings (got {key!r} in {path})", field="metadata"
                )
            _check_metadata_value(item, f"{path}.{key}")
        return
    raise ValidationException(
        f"Unsupported metadata value at {path}: {type(value).__name__}", field="metadata"
    )


def _freeze_metadata(metadata: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    if metadata is None:
        return None
    if not isinstance(metadata, Mapping):
        raise ValidationException("metadata must be a key/value mapping", field="metadata")
    _check_metadata_value(metadata, "metadata")
    return MappingProxyType(dict(metadata))


@dataclass(frozen=True)
class AuditRecord:
    """Immutable audit record.

    Use AuditRecord.create() for new records (validates, trims, assigns id and
    timestamps) and AuditRecord.from_persistence() to rehydrate stored ones.
    metadata is opaque: stored and returned as given, never interpreted.
    """

    id: str
    actor_id: str
    action: AuditAction
    entity_type: AuditEntityType
    entity_id: str
    created_at: datetime
    updated_at: datetime
    metadata: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate record invariants. Raises ValidationException if invalid."""
        if not self.id:
            raise ValidationException("Audit record ID is required", field="id")
        if not isinstance(self.action, AuditAction):
            raise ValidationException("action must be an AuditAction", field="action")
        if not isinstance(self.entity_type, AuditEntityType):
            raise ValidationException(
                "entity_type must be an AuditEntityType", field="entity_type"
            )
        if self.updated_at != self.created_at:
            raise ValidationException(
                "Audit records are immutable; updated_at must equal created_at",
                field="updated_at",
            )

    @classmethod
    def create(
        cls,
        *,
        actor_id: str,
        action: AuditAction | str,
        entity_type: AuditEntityType | str,
        entity_id: str,
        metadata: Mapping[str, Any] | None = None,
        record_id: str | None = None,
        now: datetime | None = None,
    ) -> AuditRecord:
        """Build a new record from raw input.

        Raises:
            ValidationException: On empty actor/entity id or an action/entity
                type outside its closed set.
        """
        timestamp = ensure_utc(now) if now is not None else utc_now()
        return cls(
            id=record_id or generate_cuid(),
            actor_id=_required_id(actor_id, "actor_id", "Actor ID"),
            action=_coerce_action(action),
            entity_type=_coerce_entity_type(entity_type),
            entity_id=_required_id(entity_id, "entity_id", "Affected entity ID"),
            created_at=timestamp,
            updated_at=timestamp,
            metadata=_freeze_metadata(metadata),
        )

    @classmethod
    def from_persistence(cls, record_id: str, data: Mapping[str, Any]) -> AuditRecord:
        """Rehydrate a stored record (document fields keyed as in to_dict())."""
        created_at = ensure_utc(data["created_at"])
        return cls(
            id=record_id,
            actor_id=data["actor_id"],
            action=_coerce_action(data["action"]),
            entity_type=_coerce_entity_type(data["entity_type"]),
            entity_id=data["entity_id"],
            created_at=created_at,
            updated_at=created_at,
            metadata=_freeze_metadata(data.get("metadata")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Persisted/public shape. metadata is omitted when absent."""
        out: dict[str, Any] = {
            "id": self.id,
            "actor_id": self.actor_id,
            "action": self.action.value,
            "entity_type": self.entity_type.value,
            "entity_id": self.entity_id,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
        if self.metadata is not None:
            out["metadata"] = dict(self.metadata)
        return out
