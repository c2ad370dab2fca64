"""Audit log API: read-only list of recent actions for administrators."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from taxwise.api.v1.dependencies import get_audit_log_reader, require_admin_key
from taxwise.application.services.audit_log_reader import (
    DEFAULT_AUDIT_LOG_LIMIT,
    MAX_AUDIT_LOG_LIMIT,
    AuditLogReader,
)
from taxwise.core.limiter import limit_admin_read
from taxwise.schemas.audit_log import AuditLogEntryResponse

router = APIRouter()


@router.get(
    "",
    response_model=list[AuditLogEntryResponse],
    dependencies=[Depends(require_admin_key)],
)
@limit_admin_read
async def list_audit_logs(
    request: Request,
    reader: Annotated[AuditLogReader, Depends(get_audit_log_reader)],
    limit: int = Query(DEFAULT_AUDIT_LOG_LIMIT, ge=1, le=MAX_AUDIT_LOG_LIMIT),
):
    """Return the most recent audit entries, newest first."""
    entries = await reader.list_recent(limit)
    return [AuditLogEntryResponse.model_validate(e) for e in entries]
