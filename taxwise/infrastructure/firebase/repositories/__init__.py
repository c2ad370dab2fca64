"""Firestore-backed repository implementations."""

from taxwise.infrastructure.firebase.repositories.audit_log_repo_firestore import (
    FirestoreAuditLogRepository,
)

__all__ = [
    "FirestoreAuditLogRepository",
]
