"""Pytest configuration and fixtures for taxwise.

The app is exercised through httpx.ASGITransport, which does not run the
lifespan; routes get their collaborators through app.dependency_overrides
and the in-memory fakes below.
"""

import os
from collections.abc import AsyncIterator
from datetime import UTC, datetime

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("STORAGE_BACKEND", "local")
os.environ.setdefault("TELEMETRY_ENABLED", "false")
os.environ.pop("ADMIN_API_KEY", None)

from taxwise.api.v1 import dependencies as deps  # noqa: E402
from taxwise.application.dtos.audit_log import AuditLogEntryCreate, AuditLogResult  # noqa: E402
from taxwise.application.services.audit_logger import AuditLogger  # noqa: E402
from taxwise.application.use_cases.exports import ExportPackageAssembler  # noqa: E402
from taxwise.core.config import get_settings  # noqa: E402
from taxwise.core.limiter import limiter  # noqa: E402
from taxwise.infrastructure.exceptions import (  # noqa: E402
    SignedUrlFetchError,
    StorageNotFoundError,
)
from taxwise.main import app  # noqa: E402

FIXED_NOW = datetime(2024, 3, 1, 12, 30, 45, 123000, tzinfo=UTC)


class FakeObjectStore:
    """Object store backed by a dict; unknown paths raise StorageNotFoundError."""

    def __init__(self, objects: dict[str, bytes] | None = None) -> None:
        self.objects = dict(objects or {})
        self.requested: list[str] = []

    async def fetch_bytes(self, path: str) -> bytes:
        self.requested.append(path)
        if path not in self.objects:
            raise StorageNotFoundError(path)
        return self.objects[path]


class FakeUrlFetcher:
    """Signed-URL fetcher backed by a dict of url -> bytes or exception."""

    def __init__(self, responses: dict[str, bytes | Exception] | None = None) -> None:
        self.responses = dict(responses or {})
        self.requested: list[str] = []

    async def fetch_bytes_via_url(self, url: str) -> bytes:
        self.requested.append(url)
        outcome = self.responses.get(url)
        if outcome is None:
            raise SignedUrlFetchError("Not Found", 404)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeAuditLogRepository:
    """Append-only list; set fail=True to make every call raise."""

    def __init__(self, fail: bool = False) -> None:
        self.entries: list[AuditLogEntryCreate] = []
        self.stored: list[AuditLogResult] = []
        self.fail = fail

    async def append(self, entry: AuditLogEntryCreate) -> None:
        if self.fail:
            raise RuntimeError("audit store unavailable")
        self.entries.append(entry)

    async def list_recent(self, limit: int = 100) -> list[AuditLogResult]:
        if self.fail:
            raise RuntimeError("audit store unavailable")
        return sorted(self.stored, key=lambda e: e.timestamp, reverse=True)[:limit]


@pytest.fixture
def object_store() -> FakeObjectStore:
    return FakeObjectStore()


@pytest.fixture
def url_fetcher() -> FakeUrlFetcher:
    return FakeUrlFetcher()


@pytest.fixture
def audit_repo() -> FakeAuditLogRepository:
    return FakeAuditLogRepository()


@pytest.fixture
def assembler(
    object_store: FakeObjectStore,
    url_fetcher: FakeUrlFetcher,
    audit_repo: FakeAuditLogRepository,
) -> ExportPackageAssembler:
    return ExportPackageAssembler(
        object_store,
        url_fetcher,
        AuditLogger(audit_repo),
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
async def client(
    assembler: ExportPackageAssembler,
    audit_repo: FakeAuditLogRepository,
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI) with fake collaborators."""
    get_settings.cache_clear()
    limiter.reset()
    app.dependency_overrides[deps.get_export_assembler] = lambda: assembler
    app.dependency_overrides[deps.get_audit_log_repo] = lambda: audit_repo
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    get_settings.cache_clear()
