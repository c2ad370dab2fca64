"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the shared clients created by the lifespan
(app.state) and for the application services built on them. Routes depend
only on these; tests replace them with app.dependency_overrides.
"""

from __future__ import annotations

import secrets
from typing import Annotated

import httpx
from fastapi import Depends, Header, Request

from taxwise.application.interfaces.services import (
    IAuditLogRepository,
    ILLMClient,
    IObjectStore,
    ISignedUrlFetcher,
)
from taxwise.application.services.audit_log_reader import AuditLogReader
from taxwise.application.services.audit_logger import AuditLogger
from taxwise.application.use_cases.exports import ExportPackageAssembler
from taxwise.application.use_cases.suggestions import SuggestDeductionsService
from taxwise.core.config import Settings, get_settings
from taxwise.domain.exceptions import AuthorizationException
from taxwise.infrastructure.external.storage.signed_url import SignedUrlFetcher
from taxwise.infrastructure.firebase.client import FirebaseHandles
from taxwise.infrastructure.firebase.repositories import FirestoreAuditLogRepository


def get_settings_dep() -> Settings:
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_settings_dep)]


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared outbound client created in the lifespan."""
    return request.app.state.http_client


def get_object_store(request: Request) -> IObjectStore:
    return request.app.state.object_store


def get_llm_client(request: Request) -> ILLMClient:
    return request.app.state.llm_client


def get_signed_url_fetcher(
    http_client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    settings: SettingsDep,
) -> ISignedUrlFetcher:
    return SignedUrlFetcher(http_client, timeout=settings.http_fetch_timeout_seconds)


def get_audit_log_repo(request: Request) -> IAuditLogRepository | None:
    """Firestore audit repository, or None when Firebase is not configured."""
    firebase: FirebaseHandles | None = getattr(request.app.state, "firebase", None)
    if firebase is None:
        return None
    return FirestoreAuditLogRepository(firebase.firestore)


def get_audit_logger(
    repo: Annotated[IAuditLogRepository | None, Depends(get_audit_log_repo)],
    settings: SettingsDep,
) -> AuditLogger:
    return AuditLogger(repo, write_timeout=settings.audit_write_timeout_seconds)


def get_audit_log_reader(
    repo: Annotated[IAuditLogRepository | None, Depends(get_audit_log_repo)],
) -> AuditLogReader:
    return AuditLogReader(repo)


def get_export_assembler(
    object_store: Annotated[IObjectStore, Depends(get_object_store)],
    url_fetcher: Annotated[ISignedUrlFetcher, Depends(get_signed_url_fetcher)],
    audit_logger: Annotated[AuditLogger, Depends(get_audit_logger)],
    settings: SettingsDep,
) -> ExportPackageAssembler:
    return ExportPackageAssembler(
        object_store,
        url_fetcher,
        audit_logger,
        archive_prefix=settings.export_archive_prefix,
    )


def get_suggestion_service(
    llm_client: Annotated[ILLMClient, Depends(get_llm_client)],
    audit_logger: Annotated[AuditLogger, Depends(get_audit_logger)],
) -> SuggestDeductionsService:
    return SuggestDeductionsService(llm_client, audit_logger)


def require_admin_key(
    settings: SettingsDep,
    x_admin_key: Annotated[str | None, Header()] = None,
) -> None:
    """Require X-Admin-Key to match ADMIN_API_KEY when one is configured."""
    if settings.admin_api_key is None:
        return
    expected = settings.admin_api_key.get_secret_value()
    if not x_admin_key or not secrets.compare_digest(x_admin_key, expected):
        raise AuthorizationException("Valid X-Admin-Key header required")
