"""API tests for POST /api/v1/suggestions."""

import json
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from taxwise.api.v1 import dependencies as deps
from taxwise.application.services.audit_logger import AuditLogger
from taxwise.application.use_cases.suggestions import SuggestDeductionsService
from taxwise.infrastructure.exceptions import LLMError
from taxwise.main import app
from tests.conftest import FakeAuditLogRepository

URL = "/api/v1/suggestions"

BODY = {
    "userId": "u1",
    "userName": "Jane",
    "financialData": {
        "income": {
            "job": {"value": 50000, "currency": "USD"},
            "investments": {"value": 0, "currency": "USD"},
            "propertyIncome": {"value": 0, "currency": "USD"},
            "credits": {"value": 0, "currency": "USD"},
            "otherIncomeDetails": "",
        },
        "expenses": {
            "medical": {"value": 3000, "currency": "RUB"},
            "educational": {"value": 0, "currency": "USD"},
            "social": {"value": 0, "currency": "USD"},
            "property": {"value": 0, "currency": "USD"},
            "otherExpensesDetails": "",
        },
    },
    "documentsDataUrls": [],
}


@pytest.fixture
def llm() -> AsyncMock:
    mock = AsyncMock()
    mock.provider = "openai"
    app.dependency_overrides[deps.get_suggestion_service] = lambda: SuggestDeductionsService(
        mock, AuditLogger(FakeAuditLogRepository())
    )
    return mock


async def test_returns_suggestions(client: AsyncClient, llm: AsyncMock) -> None:
    llm.complete_json.return_value = json.dumps(
        {"suggestedDeductions": ["Medical: treatment costs"], "summary": "Claim medical."}
    )

    response = await client.post(URL, json=BODY)

    assert response.status_code == 200
    assert response.json() == {
        "suggestedDeductions": ["Medical: treatment costs"],
        "summary": "Claim medical.",
    }
    prompt = llm.complete_json.await_args.args[0]
    assert "Medical: 3000 RUB" in prompt


async def test_llm_failure_is_502_with_error(client: AsyncClient, llm: AsyncMock) -> None:
    llm.complete_json.side_effect = LLMError("openai", "rate limited")

    response = await client.post(URL, json=BODY)

    assert response.status_code == 502
    assert response.json() == {
        "error": "Failed to get deduction suggestions: openai request failed: rate limited. "
        "Please try again."
    }


async def test_invalid_currency_is_422(client: AsyncClient, llm: AsyncMock) -> None:
    body = json.loads(json.dumps(BODY))
    body["financialData"]["income"]["job"]["currency"] = "GBP"

    response = await client.post(URL, json=body)

    assert response.status_code == 422
    llm.complete_json.assert_not_awaited()
