"""API tests for POST /api/v1/export-package."""

import base64
import io
import zipfile
from unittest.mock import patch

from httpx import AsyncClient

from taxwise.application.use_cases.exports import ExportPackageAssembler
from tests.conftest import FakeAuditLogRepository, FakeObjectStore, FakeUrlFetcher

URL = "/api/v1/export-package"


def _zip_from(download_url: str) -> zipfile.ZipFile:
    payload = download_url.split(",", 1)[1]
    return zipfile.ZipFile(io.BytesIO(base64.b64decode(payload)))


async def test_general_export_with_no_documents(client: AsyncClient) -> None:
    response = await client.post(
        URL, json={"userId": "user-12345678", "category": "general", "userDocuments": []}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Package for category 'general' generated successfully."
    assert data["filename"].startswith("taxwise_export_general_user-123_")
    assert data["downloadUrl"].startswith("data:application/zip;base64,")
    with _zip_from(data["downloadUrl"]) as zf:
        assert "summary.txt" in zf.namelist()
        assert "sample_documents/sample_general_guide.txt" in zf.namelist()


async def test_partial_failure_still_returns_200(
    client: AsyncClient, url_fetcher: FakeUrlFetcher
) -> None:
    url_fetcher.responses = {"https://signed/w2": b"W2"}

    response = await client.post(
        URL,
        json={
            "userId": "u1",
            "category": "medical",
            "userDocuments": [{"filename": "w2.pdf", "signedUrl": "https://signed/w2"}],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert "generated with some issues" in data["message"]
    with _zip_from(data["downloadUrl"]) as zf:
        assert zf.read("user_documents/w2.pdf") == b"W2"
        assert "sample_documents/ERROR_FETCHING_SAMPLE_medical.txt" in zf.namelist()


async def test_user_documents_may_be_omitted(client: AsyncClient) -> None:
    response = await client.post(URL, json={"userId": "u1", "category": "general"})

    assert response.status_code == 200
    with _zip_from(response.json()["downloadUrl"]) as zf:
        assert "user_documents/INFO_NO_USER_DOCS.txt" in zf.namelist()


async def test_incomplete_document_entry_is_skipped_not_rejected(client: AsyncClient) -> None:
    response = await client.post(
        URL,
        json={"userId": "u1", "category": "general", "userDocuments": [{"filename": "a.pdf"}]},
    )

    assert response.status_code == 200
    assert response.json()["success"] is False


async def test_unknown_category_is_server_error(client: AsyncClient) -> None:
    response = await client.post(URL, json={"userId": "u1", "category": "crypto"})

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert data["message"].startswith("Server error: ")


async def test_invalid_json_is_server_error(client: AsyncClient) -> None:
    response = await client.post(
        URL, content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 500
    assert response.json()["message"].startswith("Server error: Invalid JSON body")


async def test_non_utf8_body_is_server_error(client: AsyncClient) -> None:
    response = await client.post(
        URL,
        content=b'{"userId": "\xff\xfe", "category": "general"}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert data["message"].startswith("Server error: Invalid JSON body")


async def test_missing_user_id_is_server_error(client: AsyncClient) -> None:
    response = await client.post(URL, json={"category": "general"})

    assert response.status_code == 500
    assert response.json()["success"] is False


async def test_archive_failure_is_server_error(client: AsyncClient) -> None:
    with patch.object(ExportPackageAssembler, "_write_archive", side_effect=OSError("disk full")):
        response = await client.post(URL, json={"userId": "u1", "category": "general"})

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert "disk full" in data["message"]


async def test_audit_failure_does_not_change_response(
    client: AsyncClient,
    audit_repo: FakeAuditLogRepository,
    object_store: FakeObjectStore,
) -> None:
    audit_repo.fail = True
    object_store.objects["app_resources/sample_documents/social_KND1150130.pdf"] = b"%PDF"

    response = await client.post(URL, json={"userId": "u1", "category": "social"})

    assert response.status_code == 200
    assert response.json()["success"] is True


async def test_successful_export_is_audited(
    client: AsyncClient, audit_repo: FakeAuditLogRepository
) -> None:
    response = await client.post(
        URL, json={"userId": "u1", "userName": "Jane", "category": "general"}
    )

    entry = audit_repo.entries[0]
    assert entry.user_name == "Jane"
    assert entry.details == f"Success. Category: general, Filename: {response.json()['filename']}"
