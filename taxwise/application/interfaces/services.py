"""Service interfaces (ports) for the application layer.

Protocols define the contracts the use cases depend on; infrastructure
provides the implementations (Firebase/local storage, httpx, Firestore,
OpenAI) and tests provide fakes.
"""

from __future__ import annotations

from typing import Protocol

from taxwise.application.dtos.audit_log import AuditLogEntryCreate, AuditLogResult


class IObjectStore(Protocol):
    """Shared object store holding fixed resources (reference documents)."""

    async def fetch_bytes(self, path: str) -> bytes:
        """Return the full object at path. Raises StorageException on failure."""


class ISignedUrlFetcher(Protocol):
    """Fetches user files through short-lived pre-authorized URLs."""

    async def fetch_bytes_via_url(self, url: str) -> bytes:
        """GET url and return the body. Raises SignedUrlFetchError on non-2xx or transport errors."""


class IAuditLogRepository(Protocol):
    """Append-only audit log store."""

    async def append(self, entry: AuditLogEntryCreate) -> None:
        """Persist one record; the store assigns id and server timestamp."""

    async def list_recent(self, limit: int = 100) -> list[AuditLogResult]:
        """Return up to limit records, newest first."""


class ILLMClient(Protocol):
    """Single-shot language-model call that is asked to answer in JSON."""

    @property
    def provider(self) -> str: ...

    async def complete_json(self, prompt: str, attachments: list[str]) -> str:
        """Send prompt plus data-URI attachments; return the raw text answer."""
