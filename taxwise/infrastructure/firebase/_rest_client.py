"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
All HTTP calls go through an httpx.AsyncClient so they do not block the
event loop. Only the operations this service needs are implemented:
server-timestamped appends and ordered, limited queries.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Sequence
from typing import Any

import httpx

from taxwise.infrastructure.firebase._rest_encoding import (
    decode_document,
    encode_fields,
)

FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
STORAGE_READ_SCOPE = "https://www.googleapis.com/auth/devstorage.read_only"
_BASE = "https://firestore.googleapis.com/v1"


def get_credentials(key_dict: dict, scopes: Sequence[str] = (FIRESTORE_SCOPE,)):
    """Return google.oauth2.service_account.Credentials for the given scopes."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=list(scopes)
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


async def get_access_token(credentials) -> str:
    """Return a valid access token; refreshes in a worker thread (google-auth is sync)."""
    return await asyncio.to_thread(_get_access_token, credentials)


class DocumentExistsError(Exception):
    """Raised when a create/commit returns 409 (document ID already exists)."""


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: dict | None = None,
    access_token: str | None = None,
) -> Any:
    """Perform an HTTP request against the REST API. 404 returns None."""
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    if method not in ("GET", "POST"):
        raise ValueError(f"Unsupported method: {method!r}")
    resp = await client.request(method, url, headers=headers, json=body)
    if resp.status_code == 404:
        return None
    if resp.status_code == 409:
        raise DocumentExistsError("Document already exists")
    resp.raise_for_status()
    return resp.json() if resp.content else {}


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


def _snapshot_from_rest(doc: dict) -> DocumentSnapshot:
    name = doc.get("name", "")
    return DocumentSnapshot(name.rsplit("/", 1)[-1] if name else "", decode_document(doc))


class DocumentReference:
    """Reference to a single document; mirrors the firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self.path = path

    @property
    def id(self) -> str:
        return self.path.rsplit("/", 1)[-1]


class Query:
    """Structured query on one collection, run via :runQuery."""

    def __init__(self, client: "FirestoreRESTClient", parent: str, collection_id: str):
        self._client = client
        self._parent = parent
        self._collection_id = collection_id
        self._order_by: list[dict[str, Any]] = []
        self._limit: int | None = None

    def order_by(self, field: str, direction: str = "ASCENDING") -> "Query":
        """Add an ordering clause. direction is ASCENDING or DESCENDING."""
        if direction not in ("ASCENDING", "DESCENDING"):
            raise ValueError(f"Unsupported order direction: {direction!r}")
        self._order_by.append(
            {"field": {"fieldPath": field}, "direction": direction}
        )
        return self

    def limit(self, n: int) -> "Query":
        self._limit = n
        return self

    def to_structured_query(self) -> dict[str, Any]:
        structured: dict[str, Any] = {
            "from": [{"collectionId": self._collection_id}],
        }
        if self._order_by:
            structured["orderBy"] = list(self._order_by)
        if self._limit:
            structured["limit"] = self._limit
        return structured

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Execute the query and yield document snapshots in server order."""
        resp = await _request_async(
            self._client.http,
            f"{_BASE}/{self._parent}:runQuery",
            method="POST",
            body={"structuredQuery": self.to_structured_query()},
            access_token=await self._client.get_token(),
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            if "document" in item:
                yield _snapshot_from_rest(item["document"])


class CollectionReference:
    """Reference to a top-level collection."""

    def __init__(self, client: "FirestoreRESTClient", collection_id: str):
        self._client = client
        self._collection_id = collection_id
        self._path = f"{client.documents_root}/{collection_id}"

    def document(self, document_id: str) -> DocumentReference:
        return DocumentReference(self._client, f"{self._path}/{document_id}")

    def order_by(self, field: str, direction: str = "ASCENDING") -> Query:
        return Query(
            self._client, self._client.documents_root, self._collection_id
        ).order_by(field, direction)

    async def add(
        self,
        document_id: str,
        data: dict[str, Any],
        *,
        server_timestamp_fields: Sequence[str] = (),
    ) -> DocumentReference:
        """Create a new document, stamping the given fields with the server time.

        Uses documents:commit so the timestamp is assigned by Firestore
        (REQUEST_TIME), not by this process. Fails with DocumentExistsError
        if the id is already taken.
        """
        ref = self.document(document_id)
        write: dict[str, Any] = {
            "update": {"name": ref.path, "fields": encode_fields(data)},
            "currentDocument": {"exists": False},
        }
        if server_timestamp_fields:
            write["updateTransforms"] = [
                {"fieldPath": f, "setToServerValue": "REQUEST_TIME"}
                for f in server_timestamp_fields
            ]
        await _request_async(
            self._client.http,
            f"{_BASE}/{self._client.documents_root}:commit",
            method="POST",
            body={"writes": [write]},
            access_token=await self._client.get_token(),
        )
        return ref


class FirestoreRESTClient:
    """Lightweight Firestore client using the REST API."""

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        http_client: httpx.AsyncClient,
    ) -> None:
        self.project_id = project_id
        self.credentials = credentials
        self.documents_root = f"projects/{project_id}/databases/(default)/documents"
        # Shared with the rest of the app; closed by the lifespan.
        self.http = http_client

    async def get_token(self) -> str:
        return await get_access_token(self.credentials)

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, collection_id)
