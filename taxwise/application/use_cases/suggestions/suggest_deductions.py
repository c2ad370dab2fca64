"""AI deduction suggestions from the user's financial data and documents."""

from __future__ import annotations

import json
import logging

import jsonschema

from taxwise.application.dtos.suggestion import (
    EXPENSE_CATEGORY_COUNT,
    INCOME_CATEGORY_COUNT,
    DeductionSuggestions,
    FinancialData,
    SuggestionError,
)
from taxwise.application.interfaces.services import ILLMClient
from taxwise.application.services.audit_logger import AuditLogger
from taxwise.application.use_cases.suggestions.prompt import (
    DEDUCTION_SUGGESTIONS_SCHEMA,
    render_prompt,
)
from taxwise.shared.enums import AuditLogAction
from taxwise.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)

FALLBACK_SUGGESTIONS = DeductionSuggestions(
    suggested_deductions=["Error: AI failed to generate suggestions. Please check logs."],
    summary="An error occurred while trying to generate deduction suggestions.",
)


def build_financial_summary(data: FinancialData) -> str:
    income, expenses = data.income, data.expenses
    return "\n".join(
        [
            "Income:",
            f"  Job: {income.job.format()}",
            f"  Investments: {income.investments.format()}",
            f"  Property Income: {income.property_income.format()}",
            f"  Credits: {income.credits.format()}",
            f"  Other Income Details: {income.other_income_details or 'None'}",
            "Expenses:",
            f"  Medical: {expenses.medical.format()}",
            f"  Educational: {expenses.educational.format()}",
            f"  Social: {expenses.social.format()}",
            f"  Property: {expenses.property.format()}",
            f"  Other Expenses Details: {expenses.other_expenses_details or 'None'}",
        ]
    )


def parse_suggestions(raw: str) -> DeductionSuggestions:
    """Validate the model answer; anything unusable becomes FALLBACK_SUGGESTIONS."""
    try:
        payload = json.loads(raw)
        jsonschema.validate(instance=payload, schema=DEDUCTION_SUGGESTIONS_SCHEMA)
    except (json.JSONDecodeError, jsonschema.ValidationError) as e:
        logger.error("LLM did not return valid deduction suggestions: %s", e)
        return FALLBACK_SUGGESTIONS
    return DeductionSuggestions(
        suggested_deductions=list(payload["suggestedDeductions"]),
        summary=payload["summary"],
    )


class SuggestDeductionsService:
    """Asks the LLM for deductions and records the request in the audit log."""

    def __init__(self, llm_client: ILLMClient, audit_logger: AuditLogger) -> None:
        self._llm = llm_client
        self._audit_logger = audit_logger

    @traced("suggestions.get_suggestions")
    async def get_suggestions(
        self,
        user_id: str,
        user_name: str,
        financial_data: FinancialData,
        document_data_urls: list[str],
    ) -> DeductionSuggestions | SuggestionError:
        prompt = render_prompt(
            build_financial_summary(financial_data), len(document_data_urls)
        )
        try:
            raw = await self._llm.complete_json(prompt, document_data_urls)
        except Exception as e:
            message = str(e) or "An unknown error occurred"
            logger.exception("Error getting deduction suggestions")
            await self._audit_logger.log_user_action(
                user_id,
                user_name,
                AuditLogAction.AI_SUGGESTIONS_REQUESTED,
                f"Error: {message}",
            )
            return SuggestionError(
                error=f"Failed to get deduction suggestions: {message}. Please try again."
            )

        result = parse_suggestions(raw)
        await self._audit_logger.log_user_action(
            user_id,
            user_name,
            AuditLogAction.AI_SUGGESTIONS_REQUESTED,
            f"Input categories: {INCOME_CATEGORY_COUNT} income, "
            f"{EXPENSE_CATEGORY_COUNT} expenses. Documents: {len(document_data_urls)}",
        )
        return result
