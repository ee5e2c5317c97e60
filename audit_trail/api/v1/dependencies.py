"""Presentation-layer dependency injection.

Routes get use cases from the AuditModule built in the lifespan and stored
on app.state.audit; nothing here constructs infrastructure.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from audit_trail.application.use_cases.audit import (
    GetAuditRecordByIdUseCase,
    GetAuditRecordsByActorUseCase,
    GetAuditRecordsByEntityUseCase,
    ListAuditRecordsUseCase,
)
from audit_trail.core.composition import AuditModule
from audit_trail.infrastructure.exceptions import RecordStoreUnavailableError


def get_audit_module(request: Request) -> AuditModule:
    """AuditModule for this app. Raises RecordStoreUnavailableError before startup has run."""
    module = getattr(request.app.state, "audit", None)
    if module is None:
        raise RecordStoreUnavailableError("audit", "application not started")
    return module


AuditModuleDep = Annotated[AuditModule, Depends(get_audit_module)]


def get_record_by_id_use_case(module: AuditModuleDep) -> GetAuditRecordByIdUseCase:
    return module.get_record


def get_list_records_use_case(module: AuditModuleDep) -> ListAuditRecordsUseCase:
    return module.list_records


def get_records_by_entity_use_case(
    module: AuditModuleDep,
) -> GetAuditRecordsByEntityUseCase:
    return module.records_by_entity


def get_records_by_actor_use_case(
    module: AuditModuleDep,
) -> GetAuditRecordsByActorUseCase:
    return module.records_by_actor
