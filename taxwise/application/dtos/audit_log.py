"""DTOs for the audit log (append-only action records)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AuditLogEntryCreate:
    """Input for appending one audit record. The store assigns id and timestamp."""

    user_id: str
    user_name: str
    action: str
    details: str


@dataclass(frozen=True)
class AuditLogResult:
    """Single audit log entry (read-model for the admin list)."""

    id: str
    timestamp: datetime
    user_id: str
    user_name: str
    action: str
    details: str
