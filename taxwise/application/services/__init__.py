"""Application services shared by use cases and routes."""

from taxwise.application.services.audit_log_reader import AuditLogReader
from taxwise.application.services.audit_logger import AuditLogger
from taxwise.application.services.reference_documents import (
    REFERENCE_DOCUMENTS,
    ReferenceDocument,
    reference_document_for,
)

__all__ = [
    "AuditLogReader",
    "AuditLogger",
    "REFERENCE_DOCUMENTS",
    "ReferenceDocument",
    "reference_document_for",
]
