"""Read side of the audit log (admin list)."""

from __future__ import annotations

import logging

from taxwise.application.dtos.audit_log import AuditLogResult
from taxwise.application.interfaces.services import IAuditLogRepository
from taxwise.domain.exceptions import AuditStoreNotConfiguredException, ValidationException
from taxwise.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)

MAX_AUDIT_LOG_LIMIT = 500
DEFAULT_AUDIT_LOG_LIMIT = 100


class AuditLogReader:
    """Lists recent audit records; store failures yield an empty list."""

    def __init__(self, repository: IAuditLogRepository | None) -> None:
        self._repository = repository

    @traced("audit_logs.list_recent")
    async def list_recent(self, limit: int = DEFAULT_AUDIT_LOG_LIMIT) -> list[AuditLogResult]:
        if self._repository is None:
            raise AuditStoreNotConfiguredException()
        if not 1 <= limit <= MAX_AUDIT_LOG_LIMIT:
            raise ValidationException(
                f"limit must be between 1 and {MAX_AUDIT_LOG_LIMIT}", field="limit"
            )
        try:
            return await self._repository.list_recent(limit)
        except Exception:
            logger.exception("Failed to read audit logs (limit=%s)", limit)
            return []
