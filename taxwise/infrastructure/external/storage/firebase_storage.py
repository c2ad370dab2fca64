"""Firebase Storage (Cloud Storage JSON API) object store.

Reads objects with the service-account credentials already loaded for
Firestore; no firebase-admin or google-cloud-storage dependency.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from taxwise.infrastructure.exceptions import (
    StorageDownloadError,
    StorageNotFoundError,
    StoragePermissionError,
)
from taxwise.infrastructure.firebase._rest_client import get_access_token

_GCS_BASE = "https://storage.googleapis.com/storage/v1"


class FirebaseStorageService:
    """Fetches whole objects from a Firebase Storage bucket."""

    def __init__(
        self,
        bucket: str,
        credentials: Any,
        http_client: httpx.AsyncClient,
    ) -> None:
        self.bucket = bucket
        self._credentials = credentials
        self._http = http_client

    def _object_url(self, path: str) -> str:
        return f"{_GCS_BASE}/b/{quote(self.bucket, safe='')}/o/{quote(path, safe='')}?alt=media"

    async def fetch_bytes(self, path: str) -> bytes:
        """Download the object at path."""
        try:
            token = await get_access_token(self._credentials)
            resp = await self._http.get(
                self._object_url(path),
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as e:
            raise StorageDownloadError(path, str(e) or type(e).__name__) from e
        if resp.status_code == 404:
            raise StorageNotFoundError(path)
        if resp.status_code in (401, 403):
            raise StoragePermissionError(path, f"HTTP {resp.status_code}")
        if not resp.is_success:
            raise StorageDownloadError(path, f"HTTP {resp.status_code}")
        return resp.content
