"""Domain exceptions for the TaxWise application.

Independent of infrastructure. The presentation layer maps them to HTTP
responses in taxwise.core.exception_handlers using error_code.
"""

from typing import Any


class TaxwiseException(Exception):
    """Base exception for all TaxWise application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TaxwiseException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthorizationException(TaxwiseException):
    """Raised when the caller lacks the credentials for an admin operation."""

    def __init__(self, message: str = "Permission denied") -> None:
        super().__init__(message, "PERMISSION_DENIED")


class ExportAssemblyException(TaxwiseException):
    """Raised when the export archive itself cannot be produced.

    Individual file failures never raise; they become error entries inside
    the archive. Only a failure to serialize the archive ends up here.
    """

    def __init__(self, category: str, reason: str) -> None:
        super().__init__(
            f"Could not build export package for category '{category}': {reason}",
            "EXPORT_ASSEMBLY_ERROR",
            {"category": category, "reason": reason},
        )


class AuditStoreNotConfiguredException(TaxwiseException):
    """Raised when reading audit logs but no Firestore client is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="Audit log store is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
