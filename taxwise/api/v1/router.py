"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from taxwise.api.v1.dependencies.
"""

from fastapi import APIRouter

from taxwise.api.v1.endpoints import audit_logs, export_package, health, suggestions

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    export_package.router, prefix="/export-package", tags=["export"]
)
api_router.include_router(suggestions.router, prefix="/suggestions", tags=["suggestions"])
api_router.include_router(audit_logs.router, prefix="/audit-logs", tags=["audit-logs"])
