"""Append-only audit trail for the HR document-management backend."""
