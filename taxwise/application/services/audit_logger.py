"""Best-effort audit logging.

Audit writes must never break or stall the operation being audited: every
failure is logged and swallowed here, and a write that takes longer than
write_timeout seconds is abandoned.
"""

from __future__ import annotations

import asyncio
import logging

from taxwise.application.dtos.audit_log import AuditLogEntryCreate
from taxwise.application.interfaces.services import IAuditLogRepository
from taxwise.shared.enums import SYSTEM_ACTOR_ID, SYSTEM_ACTOR_NAME, AuditLogAction

logger = logging.getLogger(__name__)

DEFAULT_AUDIT_WRITE_TIMEOUT = 5.0


class AuditLogger:
    """Writes user actions to the audit log without ever raising."""

    def __init__(
        self,
        repository: IAuditLogRepository | None,
        write_timeout: float = DEFAULT_AUDIT_WRITE_TIMEOUT,
    ) -> None:
        self._repository = repository
        self._write_timeout = write_timeout
        if repository is None:
            logger.warning("Audit log store not configured; audit records will be dropped")

    async def log_user_action(
        self,
        user_id: str | None,
        user_name: str | None,
        action: AuditLogAction | str,
        details: str | None = None,
    ) -> None:
        if self._repository is None:
            return
        entry = AuditLogEntryCreate(
            user_id=user_id or SYSTEM_ACTOR_ID,
            user_name=user_name or SYSTEM_ACTOR_NAME,
            action=action.value if isinstance(action, AuditLogAction) else action,
            details=details or "",
        )
        try:
            await asyncio.wait_for(
                self._repository.append(entry), timeout=self._write_timeout
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Audit log write timed out after %ss action=%s",
                self._write_timeout,
                entry.action,
            )
        except Exception:
            logger.exception("Failed to write audit log entry action=%s", entry.action)
