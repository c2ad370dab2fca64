"""Application ports (Protocols) implemented by infrastructure."""

from taxwise.application.interfaces.services import (
    IAuditLogRepository,
    ILLMClient,
    IObjectStore,
    ISignedUrlFetcher,
)

__all__ = [
    "IAuditLogRepository",
    "ILLMClient",
    "IObjectStore",
    "ISignedUrlFetcher",
]
