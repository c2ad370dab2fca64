"""Firestore-backed audit log repository (implements IAuditLogRepository)."""

from __future__ import annotations

from datetime import datetime

from taxwise.application.dtos.audit_log import AuditLogEntryCreate, AuditLogResult
from taxwise.infrastructure.firebase._rest_client import FirestoreRESTClient
from taxwise.infrastructure.firebase.collections import COLLECTION_AUDIT_LOGS
from taxwise.shared.enums import SYSTEM_ACTOR_ID, SYSTEM_ACTOR_NAME
from taxwise.shared.utils.datetime import ensure_utc, utc_now
from taxwise.shared.utils.generators import generate_cuid


class FirestoreAuditLogRepository:
    """Audit records in the auditLogs collection, timestamped by the server."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._coll = client.collection(COLLECTION_AUDIT_LOGS)

    async def append(self, entry: AuditLogEntryCreate) -> None:
        """Append one record; `timestamp` is set to the commit time by Firestore."""
        await self._coll.add(
            generate_cuid(),
            {
                "userId": entry.user_id,
                "userName": entry.user_name,
                "action": entry.action,
                "details": entry.details,
            },
            server_timestamp_fields=("timestamp",),
        )

    async def list_recent(self, limit: int = 100) -> list[AuditLogResult]:
        """Return up to limit records ordered by timestamp, newest first."""
        query = self._coll.order_by("timestamp", "DESCENDING").limit(limit)
        results: list[AuditLogResult] = []
        async for snapshot in query.stream():
            data = snapshot.to_dict()
            ts = data.get("timestamp")
            results.append(
                AuditLogResult(
                    id=snapshot.id,
                    timestamp=ensure_utc(ts) if isinstance(ts, datetime) else utc_now(),
                    user_id=data.get("userId") or SYSTEM_ACTOR_ID,
                    user_name=data.get("userName") or SYSTEM_ACTOR_NAME,
                    action=data.get("action", ""),
                    details=data.get("details") or "",
                )
            )
        return results
