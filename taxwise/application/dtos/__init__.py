"""Application DTOs (plain dataclasses; no framework or ORM types)."""

from taxwise.application.dtos.audit_log import AuditLogEntryCreate, AuditLogResult
from taxwise.application.dtos.export import (
    ExportRequest,
    ExportResult,
    UserDocumentRef,
)
from taxwise.application.dtos.suggestion import (
    DeductionSuggestions,
    ExpenseData,
    FinancialData,
    IncomeData,
    MonetaryAmount,
    SuggestionError,
)

__all__ = [
    "AuditLogEntryCreate",
    "AuditLogResult",
    "ExportRequest",
    "ExportResult",
    "UserDocumentRef",
    "DeductionSuggestions",
    "ExpenseData",
    "FinancialData",
    "IncomeData",
    "MonetaryAmount",
    "SuggestionError",
]
