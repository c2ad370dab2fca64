"""Infrastructure exceptions for storage and external operations.

These extend TaxwiseException so presentation can map them to HTTP
responses consistently. Inside the export assembler they are caught per
file and turned into in-archive error entries instead.
"""

from taxwise.domain.exceptions import TaxwiseException


class StorageException(TaxwiseException):
    """Base exception for storage operations."""


class StorageNotFoundError(StorageException):
    """File or object not found in storage."""

    def __init__(self, file_path: str) -> None:
        super().__init__(
            f"File not found: {file_path}",
            "STORAGE_NOT_FOUND",
            {"file_path": file_path},
        )


class StoragePermissionError(StorageException):
    """Path escapes the storage root or access is denied by the backend."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            f"Access denied for file: {file_path}",
            "STORAGE_PERMISSION_ERROR",
            {"file_path": file_path, "reason": reason},
        )


class StorageDownloadError(StorageException):
    """File download failed."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to download file: {file_path} ({reason})",
            "STORAGE_DOWNLOAD_ERROR",
            {"file_path": file_path, "reason": reason},
        )


class SignedUrlFetchError(StorageException):
    """GET on a short-lived access URL failed (non-2xx, network error, timeout)."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        details: dict[str, object] = {"reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(reason, "SIGNED_URL_FETCH_ERROR", details)
        self.status_code = status_code


class LLMError(TaxwiseException):
    """Language-model call failed (provider error, missing key, rate limit)."""

    def __init__(self, provider: str, reason: str) -> None:
        super().__init__(
            f"{provider} request failed: {reason}",
            "LLM_ERROR",
            {"provider": provider, "reason": reason},
        )
