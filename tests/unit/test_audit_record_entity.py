"""Tests for the AuditRecord entity, its closed enumerations, and domain exceptions."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from audit_trail.domain.entities.audit_record import AuditRecord
from audit_trail.domain.enums import AuditAction, AuditEntityType, SortField, SortOrder
from audit_trail.domain.exceptions import (
    AuditRecordNotFoundException,
    AuditTrailException,
    ValidationException,
)


def _create(**overrides) -> AuditRecord:
    data = {
        "actor_id": "u1",
        "action": "create",
        "entity_type": "collaborator",
        "entity_id": "c42",
    }
    data.update(overrides)
    return AuditRecord.create(**data)


class TestAuditRecordCreate:
    def test_assigns_id_and_equal_timestamps(self) -> None:
        record = _create()
        assert record.id
        assert record.created_at == record.updated_at
        assert record.created_at.tzinfo is not None

    def test_coerces_strings_to_enums(self) -> None:
        record = _create()
        assert record.action is AuditAction.CREATE
        assert record.entity_type is AuditEntityType.COLLABORATOR

    def test_trims_ids(self) -> None:
        record = _create(actor_id="  u1  ", entity_id="\tc42 ")
        assert record.actor_id == "u1"
        assert record.entity_id == "c42"

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_rejects_missing_actor(self, value) -> None:
        with pytest.raises(ValidationException) as exc_info:
            _create(actor_id=value)
        assert exc_info.value.field == "actor_id"

    @pytest.mark.parametrize("value", ["", "  "])
    def test_rejects_missing_entity_id(self, value) -> None:
        with pytest.raises(ValidationException) as exc_info:
            _create(entity_id=value)
        assert exc_info.value.field == "entity_id"

    def test_rejects_action_outside_closed_set(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            _create(action="archive")
        assert exc_info.value.field == "action"

    def test_rejects_entity_type_outside_closed_set(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            _create(entity_type="invoice")
        assert exc_info.value.field == "entity_type"

    def test_rejects_non_mapping_metadata(self) -> None:
        with pytest.raises(ValidationException):
            _create(metadata=["not", "a", "mapping"])

    @pytest.mark.parametrize(
        "metadata",
        [
            {"tags": {"a", "b"}},
            {"owner": object()},
            {"nested": {"ids": [1, {2, 3}]}},
            {"nested": {1: "non-string key"}},
        ],
    )
    def test_rejects_metadata_a_store_cannot_persist(self, metadata) -> None:
        with pytest.raises(ValidationException) as exc_info:
            _create(metadata=metadata)
        assert exc_info.value.field == "metadata"

    def test_accepts_nested_plain_metadata(self) -> None:
        metadata = {"updated_fields": ["email"], "file": {"size": 2048, "ratio": 0.5, "ok": True}}
        assert dict(_create(metadata=metadata).metadata) == metadata

    def test_explicit_id_and_time(self) -> None:
        now = datetime(2025, 3, 1, 8, 30, tzinfo=timezone(timedelta(hours=-6)))
        record = _create(record_id="rec-1", now=now)
        assert record.id == "rec-1"
        assert record.created_at == now
        assert record.created_at.utcoffset() == timedelta(0)

    def test_two_creates_yield_distinct_ids(self) -> None:
        assert _create().id != _create().id


class TestAuditRecordImmutability:
    def test_fields_cannot_be_reassigned(self) -> None:
        record = _create()
        with pytest.raises(FrozenInstanceError):
            record.actor_id = "someone-else"  # type: ignore[misc]

    def test_metadata_is_read_only_and_detached(self) -> None:
        source = {"first_name": "Ana"}
        record = _create(metadata=source)
        source["first_name"] = "changed"
        assert record.metadata["first_name"] == "Ana"
        with pytest.raises(TypeError):
            record.metadata["first_name"] = "x"  # type: ignore[index]

    def test_updated_at_must_equal_created_at(self) -> None:
        now = datetime(2025, 1, 1, tzinfo=timezone.utc)
        with pytest.raises(ValidationException):
            AuditRecord(
                id="r1",
                actor_id="u1",
                action=AuditAction.UPDATE,
                entity_type=AuditEntityType.USER,
                entity_id="u2",
                created_at=now,
                updated_at=now + timedelta(seconds=1),
            )


class TestAuditRecordSerialization:
    def test_to_dict_omits_absent_metadata(self) -> None:
        data = _create().to_dict()
        assert "metadata" not in data
        assert data["action"] == "create"
        assert data["entity_type"] == "collaborator"

    def test_from_persistence_round_trip(self) -> None:
        record = _create(metadata={"rpe": "123"})
        restored = AuditRecord.from_persistence(record.id, record.to_dict())
        assert restored == record

    def test_from_persistence_derives_updated_at(self) -> None:
        created = datetime(2025, 1, 1, 12, 0)
        restored = AuditRecord.from_persistence(
            "r1",
            {
                "actor_id": "u1",
                "action": "login",
                "entity_type": "user",
                "entity_id": "u1",
                "created_at": created,
            },
        )
        assert restored.updated_at == restored.created_at
        assert restored.created_at.tzinfo is not None


class TestEnums:
    def test_action_closed_set(self) -> None:
        assert set(AuditAction.values()) == {
            "create",
            "update",
            "delete",
            "upload",
            "download",
            "view",
            "activate",
            "deactivate",
            "login",
            "logout",
            "refresh_token",
            "change_password",
        }

    def test_entity_type_closed_set(self) -> None:
        assert set(AuditEntityType.values()) == {
            "user",
            "collaborator",
            "document",
            "minute",
            "area",
            "adscripcion",
            "puesto",
            "document_type",
        }

    def test_has_value(self) -> None:
        assert AuditAction.has_value("login")
        assert not AuditAction.has_value("LOGIN")
        assert SortField.has_value("entity_type")
        assert SortOrder.has_value("asc")


class TestExceptions:
    def test_base_default_error_code(self) -> None:
        exc = AuditTrailException("Something failed")
        assert exc.error_code == "AuditTrailException"
        assert exc.to_dict() == {
            "error": "AuditTrailException",
            "message": "Something failed",
            "details": {},
        }

    def test_validation_exception_field(self) -> None:
        exc = ValidationException("bad", field="from")
        assert exc.error_code == "VALIDATION_ERROR"
        assert exc.details == {"field": "from"}
        assert exc.field == "from"

    def test_not_found(self) -> None:
        exc = AuditRecordNotFoundException("r9")
        assert exc.error_code == "RECORD_NOT_FOUND"
        assert exc.details == {"record_id": "r9"}
