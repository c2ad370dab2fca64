"""Object storage backends and the signed-URL fetcher."""

from taxwise.infrastructure.external.storage.factory import StorageFactory
from taxwise.infrastructure.external.storage.firebase_storage import (
    FirebaseStorageService,
)
from taxwise.infrastructure.external.storage.local_storage import LocalObjectStore
from taxwise.infrastructure.external.storage.signed_url import SignedUrlFetcher

__all__ = [
    "FirebaseStorageService",
    "LocalObjectStore",
    "SignedUrlFetcher",
    "StorageFactory",
]
