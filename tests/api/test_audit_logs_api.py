"""API tests for GET /api/v1/audit-logs."""

from datetime import UTC, datetime

from httpx import AsyncClient
from pydantic import SecretStr

from taxwise.api.v1 import dependencies as deps
from taxwise.application.dtos.audit_log import AuditLogResult
from taxwise.core.config import Settings
from taxwise.main import app
from tests.conftest import FakeAuditLogRepository

URL = "/api/v1/audit-logs"


def _entry(i: int) -> AuditLogResult:
    return AuditLogResult(
        id=f"log{i}",
        timestamp=datetime(2024, 1, 1, 0, i, tzinfo=UTC),
        user_id="u1",
        user_name="Jane",
        action="Document Exported",
        details=f"entry {i}",
    )


async def test_lists_newest_first_with_camel_case_keys(
    client: AsyncClient, audit_repo: FakeAuditLogRepository
) -> None:
    audit_repo.stored = [_entry(1), _entry(3), _entry(2)]

    response = await client.get(URL, params={"limit": 2})

    assert response.status_code == 200
    data = response.json()
    assert [e["id"] for e in data] == ["log3", "log2"]
    assert data[0]["userId"] == "u1"
    assert data[0]["userName"] == "Jane"


async def test_limit_out_of_range_is_rejected(client: AsyncClient) -> None:
    response = await client.get(URL, params={"limit": 0})
    assert response.status_code == 422
    response = await client.get(URL, params={"limit": 501})
    assert response.status_code == 422


async def test_store_error_returns_empty_list(
    client: AsyncClient, audit_repo: FakeAuditLogRepository
) -> None:
    audit_repo.fail = True

    response = await client.get(URL)

    assert response.status_code == 200
    assert response.json() == []


async def test_unconfigured_store_is_503(client: AsyncClient) -> None:
    app.dependency_overrides[deps.get_audit_log_repo] = lambda: None

    response = await client.get(URL)

    assert response.status_code == 503
    assert response.json()["error"] == "SERVICE_UNAVAILABLE"


async def test_admin_key_required_when_configured(client: AsyncClient) -> None:
    app.dependency_overrides[deps.get_settings_dep] = lambda: Settings(
        admin_api_key=SecretStr("s3cret")
    )

    response = await client.get(URL)
    assert response.status_code == 403
    assert response.json()["error"] == "PERMISSION_DENIED"

    response = await client.get(URL, headers={"X-Admin-Key": "wrong"})
    assert response.status_code == 403

    response = await client.get(URL, headers={"X-Admin-Key": "s3cret"})
    assert response.status_code == 200
