"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready."""

    status: str = Field(default="ok", description="Readiness status")
    audit_log: bool = Field(..., description="Whether the audit log store is configured")
    storage_backend: str


class ReadinessErrorResponse(BaseModel):
    """Response for GET /health/ready when Firebase credentials are unusable (503)."""

    status: str = Field(default="not_ready", description="Readiness status")
    message: str
