"""Firestore-backed repository implementations."""

from audit_trail.infrastructure.firebase.repositories.audit_record_repo_firestore import (
    FirestoreAuditRecordRepository,
)

__all__ = ["FirestoreAuditRecordRepository"]
