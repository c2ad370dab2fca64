"""Download user files through pre-authorized (signed) URLs."""

from __future__ import annotations

import httpx

from taxwise.infrastructure.exceptions import SignedUrlFetchError


class SignedUrlFetcher:
    """Plain GET with a per-request timeout; the URL itself carries authorization."""

    def __init__(self, http_client: httpx.AsyncClient, timeout: float = 30.0) -> None:
        self._http = http_client
        self._timeout = timeout

    async def fetch_bytes_via_url(self, url: str) -> bytes:
        try:
            resp = await self._http.get(url, timeout=self._timeout, follow_redirects=True)
        except httpx.TimeoutException as e:
            raise SignedUrlFetchError(f"Request timed out after {self._timeout:g}s") from e
        except httpx.HTTPError as e:
            raise SignedUrlFetchError(str(e) or type(e).__name__) from e
        if not resp.is_success:
            raise SignedUrlFetchError(resp.reason_phrase or "Unknown error", resp.status_code)
        return resp.content
