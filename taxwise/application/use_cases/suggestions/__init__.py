from taxwise.application.use_cases.suggestions.suggest_deductions import (
    FALLBACK_SUGGESTIONS,
    SuggestDeductionsService,
    build_financial_summary,
    parse_suggestions,
)

__all__ = [
    "FALLBACK_SUGGESTIONS",
    "SuggestDeductionsService",
    "build_financial_summary",
    "parse_suggestions",
]
