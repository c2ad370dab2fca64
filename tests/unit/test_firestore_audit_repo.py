"""Unit tests for FirestoreAuditLogRepository against a mocked Firestore REST API."""

import json
from datetime import UTC, datetime
from types import SimpleNamespace

import httpx
import pytest

from taxwise.application.dtos.audit_log import AuditLogEntryCreate
from taxwise.infrastructure.firebase._rest_client import FirestoreRESTClient
from taxwise.infrastructure.firebase.repositories import FirestoreAuditLogRepository

ROOT = "projects/demo/databases/(default)/documents"


def _client(handler) -> FirestoreRESTClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return FirestoreRESTClient(
        "demo", SimpleNamespace(valid=True, token="test-token"), http_client=http
    )


async def test_append_commits_with_server_timestamp() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"writeResults": [{}]})

    repo = FirestoreAuditLogRepository(_client(handler))
    await repo.append(
        AuditLogEntryCreate(
            user_id="u1", user_name="Jane", action="Document Exported", details="Success."
        )
    )

    assert len(captured) == 1
    request = captured[0]
    assert request.url.path == f"/v1/{ROOT}:commit"
    assert request.headers["Authorization"] == "Bearer test-token"
    write = json.loads(request.content)["writes"][0]
    assert write["update"]["name"].startswith(f"{ROOT}/auditLogs/")
    assert write["update"]["fields"] == {
        "userId": {"stringValue": "u1"},
        "userName": {"stringValue": "Jane"},
        "action": {"stringValue": "Document Exported"},
        "details": {"stringValue": "Success."},
    }
    assert write["currentDocument"] == {"exists": False}
    assert write["updateTransforms"] == [
        {"fieldPath": "timestamp", "setToServerValue": "REQUEST_TIME"}
    ]


async def test_list_recent_queries_newest_first_and_decodes() -> None:
    captured: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(json.loads(request.content))
        return httpx.Response(
            200,
            json=[
                {
                    "document": {
                        "name": f"{ROOT}/auditLogs/b",
                        "fields": {
                            "timestamp": {"timestampValue": "2024-03-02T10:00:00.123456789Z"},
                            "userId": {"stringValue": "u2"},
                            "userName": {"stringValue": "Bob"},
                            "action": {"stringValue": "Login Success"},
                            "details": {"stringValue": "ok"},
                        },
                    }
                },
                {
                    "document": {
                        "name": f"{ROOT}/auditLogs/a",
                        "fields": {
                            "userId": {"nullValue": None},
                            "userName": {"stringValue": ""},
                            "action": {"stringValue": "All Data Cleared"},
                        },
                    }
                },
                {"readTime": "2024-03-02T10:00:01Z"},
            ],
        )

    repo = FirestoreAuditLogRepository(_client(handler))
    before = datetime.now(UTC)
    entries = await repo.list_recent(limit=25)

    assert captured[0]["structuredQuery"] == {
        "from": [{"collectionId": "auditLogs"}],
        "orderBy": [{"field": {"fieldPath": "timestamp"}, "direction": "DESCENDING"}],
        "limit": 25,
    }
    assert [e.id for e in entries] == ["b", "a"]
    assert entries[0].timestamp == datetime(2024, 3, 2, 10, 0, 0, 123456, tzinfo=UTC)
    assert entries[0].user_name == "Bob"
    assert entries[1].user_id == "system"
    assert entries[1].user_name == "System"
    assert entries[1].details == ""
    assert entries[1].timestamp >= before


async def test_list_recent_propagates_http_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "boom"})

    repo = FirestoreAuditLogRepository(_client(handler))
    with pytest.raises(httpx.HTTPStatusError):
        await repo.list_recent()
