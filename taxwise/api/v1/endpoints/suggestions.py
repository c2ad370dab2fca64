"""Deduction suggestions API."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from taxwise.api.v1.dependencies import get_suggestion_service
from taxwise.application.dtos.suggestion import SuggestionError
from taxwise.application.use_cases.suggestions import SuggestDeductionsService
from taxwise.core.limiter import limit_suggestions
from taxwise.schemas.suggestion import (
    SuggestionErrorResponse,
    SuggestionRequest,
    SuggestionResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=SuggestionResponse,
    responses={502: {"model": SuggestionErrorResponse}},
)
@limit_suggestions
async def suggest_deductions(
    request: Request,
    body: SuggestionRequest,
    service: Annotated[SuggestDeductionsService, Depends(get_suggestion_service)],
):
    """Ask the language model for deductions that fit the user's data."""
    result = await service.get_suggestions(
        user_id=body.user_id,
        user_name=body.user_name,
        financial_data=body.financial_data.to_dto(),
        document_data_urls=body.documents_data_urls,
    )
    if isinstance(result, SuggestionError):
        return JSONResponse(
            status_code=502,
            content=SuggestionErrorResponse(error=result.error).model_dump(),
        )
    return SuggestionResponse.from_dto(result)
