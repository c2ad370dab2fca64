"""Local filesystem object store for reference documents."""

from __future__ import annotations

from pathlib import Path

import aiofiles

from taxwise.infrastructure.exceptions import (
    StorageDownloadError,
    StorageNotFoundError,
    StoragePermissionError,
)


class LocalObjectStore:
    """Read-only object store rooted at a directory.

    Object paths use the same layout as the Firebase bucket
    (e.g. app_resources/sample_documents/...), resolved under storage_root.
    Paths that escape the root are rejected.
    """

    CHUNK_SIZE = 64 * 1024

    def __init__(self, storage_root: str) -> None:
        self.storage_root = Path(storage_root).resolve()

    def _get_full_path(self, path: str) -> Path:
        """Resolve and validate path under storage_root. Raises StoragePermissionError if traversal."""
        full_path = (self.storage_root / path).resolve()
        try:
            full_path.relative_to(self.storage_root)
        except ValueError as e:
            raise StoragePermissionError(path, "path_validation") from e
        return full_path

    async def fetch_bytes(self, path: str) -> bytes:
        """Return the whole object at path."""
        file_path = self._get_full_path(path)
        if not file_path.is_file():
            raise StorageNotFoundError(path)
        try:
            chunks: list[bytes] = []
            async with aiofiles.open(file_path, "rb") as f:
                while True:
                    chunk = await f.read(self.CHUNK_SIZE)
                    if not chunk:
                        break
                    chunks.append(chunk)
            return b"".join(chunks)
        except OSError as e:
            raise StorageDownloadError(path, str(e)) from e
