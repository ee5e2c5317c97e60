"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when the first document is written. These constants are the single source of
truth for the "schema".

Audit record documents are keyed by record id and hold the fields of
AuditRecord.to_dict() except "id" and "updated_at" (always equal to
created_at, so it is derived on read).

Listing queries combine equality filters with a created_at range and an
ordering, which needs composite indexes, e.g.:
    actor_id ASC, created_at DESC
    entity_type ASC, entity_id ASC, created_at DESC
    action ASC, created_at DESC
"""

COLLECTION_AUDIT_RECORDS = "audit_records"
