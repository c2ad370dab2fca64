"""Firebase service-account loading and Firestore client construction.

Credentials come from FIREBASE_SERVICE_ACCOUNT_KEY (JSON string, e.g. on
serverless hosts) or FIREBASE_SERVICE_ACCOUNT_PATH (file path). The same
credentials are scoped for Firestore and read-only Cloud Storage so the
reference-document store can reuse them.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx

from taxwise.core.config import Settings
from taxwise.infrastructure.firebase._rest_client import (
    FIRESTORE_SCOPE,
    STORAGE_READ_SCOPE,
    FirestoreRESTClient,
    get_credentials,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FirebaseHandles:
    """Initialized Firebase credentials and the Firestore client built on them."""

    project_id: str
    credentials: Any
    firestore: FirestoreRESTClient


def _load_key_dict(settings: Settings) -> dict | None:
    """Return service account dict from env key or file path."""
    key_json = (
        settings.firebase_service_account_key.get_secret_value()
        if settings.firebase_service_account_key
        else None
    )
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    path = settings.firebase_service_account_path
    if path:
        resolved = Path(path).expanduser().resolve()
        if not resolved.is_file():
            logger.warning(
                "FIREBASE_SERVICE_ACCOUNT_PATH set but file not found: %s (resolved: %s)",
                path,
                resolved,
            )
            return None
        with open(resolved, encoding="utf-8") as f:
            return json.load(f)
    return None


def init_firebase(
    settings: Settings, http_client: httpx.AsyncClient
) -> FirebaseHandles | None:
    """Build Firebase handles from settings.

    Safe to call when no service account is configured (returns None). On
    malformed credentials logs the exception and returns None so the app can
    start without Firebase; audit writes then become no-ops.
    """
    try:
        key_dict = _load_key_dict(settings)
        if not key_dict:
            return None
        project_id = key_dict.get("project_id")
        if not project_id:
            logger.error("Firebase service account JSON missing 'project_id'")
            return None
        credentials = get_credentials(key_dict, (FIRESTORE_SCOPE, STORAGE_READ_SCOPE))
        return FirebaseHandles(
            project_id=project_id,
            credentials=credentials,
            firestore=FirestoreRESTClient(
                project_id, credentials, http_client=http_client
            ),
        )
    except Exception:
        logger.exception("Firebase initialization failed")
        return None
