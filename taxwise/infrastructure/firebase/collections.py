"""Firestore collection names (schema-in-code).

Firestore has no DDL; collections appear on first write. These constants
keep names consistent with the documents the web client already writes.
"""

COLLECTION_AUDIT_LOGS = "auditLogs"
