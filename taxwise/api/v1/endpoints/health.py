"""Health check endpoints for liveness and readiness probes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from taxwise.core.config import get_settings
from taxwise.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Firebase credentials unusable", "model": ReadinessErrorResponse}},
)
def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 503 when a service account is configured but Firebase failed to initialize."""
    settings = get_settings()
    firebase = getattr(request.app.state, "firebase", None)
    credentials_configured = bool(
        settings.firebase_service_account_key or settings.firebase_service_account_path
    )
    if credentials_configured and firebase is None:
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(
                message="Firebase service account is configured but could not be loaded"
            ).model_dump(),
        )
    return ReadinessResponse(
        audit_log=firebase is not None,
        storage_backend=settings.storage_backend.lower(),
    )
