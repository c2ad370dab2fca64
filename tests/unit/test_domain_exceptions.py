"""Tests for domain and infrastructure exceptions (error_code, message, details)."""

from taxwise.domain.exceptions import (
    AuditStoreNotConfiguredException,
    AuthorizationException,
    ExportAssemblyException,
    TaxwiseException,
    ValidationException,
)
from taxwise.infrastructure.exceptions import (
    LLMError,
    SignedUrlFetchError,
    StorageDownloadError,
    StorageNotFoundError,
)


def test_taxwise_exception_default_error_code() -> None:
    """Base TaxwiseException uses class name as error_code when not provided."""
    exc = TaxwiseException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TaxwiseException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_to_dict_shape() -> None:
    exc = TaxwiseException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {"error": "CUSTOM", "message": "Oops", "details": {"key": "value"}}


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("limit must be between 1 and 500", field="limit")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "limit"}
    assert ValidationException("Invalid").details == {}


def test_authorization_exception_default() -> None:
    exc = AuthorizationException()
    assert exc.message == "Permission denied"
    assert exc.error_code == "PERMISSION_DENIED"


def test_export_assembly_exception() -> None:
    exc = ExportAssemblyException("medical", "disk full")
    assert exc.error_code == "EXPORT_ASSEMBLY_ERROR"
    assert "medical" in exc.message and "disk full" in exc.message
    assert exc.details == {"category": "medical", "reason": "disk full"}


def test_audit_store_not_configured() -> None:
    assert AuditStoreNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"


def test_signed_url_fetch_error_keeps_status() -> None:
    exc = SignedUrlFetchError("Forbidden", 403)
    assert exc.status_code == 403
    assert exc.details == {"reason": "Forbidden", "status_code": 403}
    assert SignedUrlFetchError("timed out").details == {"reason": "timed out"}


def test_storage_errors_carry_path() -> None:
    assert StorageNotFoundError("a/b.pdf").details == {"file_path": "a/b.pdf"}
    exc = StorageDownloadError("a/b.pdf", "HTTP 500")
    assert exc.error_code == "STORAGE_DOWNLOAD_ERROR"
    assert exc.message == "Failed to download file: a/b.pdf (HTTP 500)"


def test_llm_error_message() -> None:
    exc = LLMError("openai", "rate limited")
    assert str(exc) == "openai request failed: rate limited"
    assert exc.details["provider"] == "openai"
