"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: shared HTTP client, Firebase
handles, the reference-document store, the LLM client and telemetry.
No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from taxwise.core.config import get_settings
from taxwise.infrastructure.external.llm.factory import get_llm_client
from taxwise.infrastructure.external.storage.factory import StorageFactory
from taxwise.infrastructure.firebase.client import init_firebase

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: HTTP client, Firebase, object store, LLM client,
    telemetry (if enabled). Shutdown order: HTTP client close, telemetry
    shutdown.
    """
    settings = get_settings()

    # ---- Startup ----
    # One outbound client for signed URLs, Firebase Storage and Firestore.
    http_client = httpx.AsyncClient(timeout=settings.http_fetch_timeout_seconds)
    app.state.http_client = http_client

    firebase = init_firebase(settings, http_client)
    if firebase is None:
        logger.warning("Firebase not configured; audit log disabled")
    else:
        logger.info("Firebase initialized for project %s", firebase.project_id)
    app.state.firebase = firebase

    app.state.object_store = StorageFactory.create_object_store(
        settings, http_client, firebase
    )
    app.state.llm_client = get_llm_client(settings)

    if settings.telemetry_enabled:
        from taxwise.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")

    from taxwise.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")
