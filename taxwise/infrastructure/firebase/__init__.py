"""Firebase integration over REST: Firestore documents and service-account auth."""

from taxwise.infrastructure.firebase.client import FirebaseHandles, init_firebase

__all__ = [
    "FirebaseHandles",
    "init_firebase",
]
