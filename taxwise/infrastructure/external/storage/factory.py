"""Object store factory: creates the Firebase or local backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from taxwise.application.interfaces.services import IObjectStore

if TYPE_CHECKING:
    from taxwise.core.config import Settings
    from taxwise.infrastructure.firebase.client import FirebaseHandles


class StorageFactory:
    """Factory for reference-document stores based on configuration."""

    @staticmethod
    def create_object_store(
        settings: "Settings",
        http_client: httpx.AsyncClient,
        firebase: "FirebaseHandles | None" = None,
    ) -> IObjectStore:
        """Create the object store for settings.storage_backend.

        Raises:
            ValueError: firebase backend selected without Firebase credentials,
                or unknown backend.
        """
        backend = settings.storage_backend.lower()

        if backend == "local":
            from taxwise.infrastructure.external.storage.local_storage import (
                LocalObjectStore,
            )

            return LocalObjectStore(storage_root=settings.storage_root)
        if backend == "firebase":
            if firebase is None:
                raise ValueError(
                    "Firebase storage backend requires FIREBASE_SERVICE_ACCOUNT_KEY "
                    "or FIREBASE_SERVICE_ACCOUNT_PATH"
                )
            from taxwise.infrastructure.external.storage.firebase_storage import (
                FirebaseStorageService,
            )

            return FirebaseStorageService(
                bucket=settings.firebase_storage_bucket or "",
                credentials=firebase.credentials,
                http_client=http_client,
            )
        raise ValueError(
            f"Unknown storage backend: {backend}. Supported: 'firebase', 'local'"
        )
