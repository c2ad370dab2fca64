"""Export package API: bundles user files and the category sample form into a ZIP.

Partial failures still answer 200 with success=false and a usable archive.
Any other failure (malformed body, archive serialization) answers 500 with
{"success": false, "message": "Server error: ..."} instead of the generic
error shape, since the web client reads `message` from every response.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from taxwise.api.v1.dependencies import get_export_assembler
from taxwise.application.use_cases.exports import ExportPackageAssembler
from taxwise.core.limiter import limit_export
from taxwise.schemas.export import (
    ExportPackageErrorResponse,
    ExportPackageRequest,
    ExportPackageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _server_error(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ExportPackageErrorResponse(message=f"Server error: {message}").model_dump(),
    )


@router.post(
    "",
    response_model=ExportPackageResponse,
    responses={500: {"model": ExportPackageErrorResponse}},
)
@limit_export
async def export_package(
    request: Request,
    assembler: Annotated[ExportPackageAssembler, Depends(get_export_assembler)],
):
    """Build the export archive and return it as a data URL."""
    try:
        payload = await request.json()
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError (non UTF-8 body)
        logger.warning("Export request body is not valid JSON: %s", e)
        return _server_error(f"Invalid JSON body: {e}")
    try:
        body = ExportPackageRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning("Export request body failed validation: %s", e.errors())
        return _server_error(str(e))

    try:
        result = await assembler.assemble(body.to_dto())
    except Exception as e:
        logger.exception("Export failed for category=%s", body.category.value)
        return _server_error(getattr(e, "message", None) or str(e))
    return ExportPackageResponse.from_result(result)
