"""Shared enumerations for the TaxWise application.

Cross-cutting enums used by application and infrastructure (audit).
Domain-specific enums (e.g. ExportCategory) live in taxwise.domain.enums.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class AuditLogAction(_ValuesMixin, str, Enum):
    """Kind of action recorded in the audit log (stored verbatim in Firestore)."""

    LOGIN_SUCCESS = "Login Success"
    USER_REGISTERED = "User Registered"
    PROFILE_UPDATED = "Profile Updated"
    AVATAR_CHANGED = "Avatar Changed"
    SETTINGS_SAVED = "Settings Saved"
    FINANCIAL_DATA_SAVED = "Financial Data Saved"
    DOCUMENT_UPLOADED = "Document Uploaded"
    DOCUMENT_REMOVED = "Document Removed"
    AI_SUGGESTIONS_REQUESTED = "AI Suggestions Requested"
    USER_CREATED_BY_ADMIN = "User Created by Admin"
    USER_ROLE_CHANGED_BY_ADMIN = "User Role Changed by Admin"
    USER_DELETED_BY_ADMIN = "User Deleted by Admin"
    GROUP_CREATED = "Group Created"
    DOCUMENT_EXPORTED = "Document Exported"
    PASSWORD_RESET_REQUESTED = "Password Reset Requested"
    ALL_DATA_CLEARED = "All Data Cleared"


# Stored in place of a missing actor on audit records.
SYSTEM_ACTOR_ID = "system"
SYSTEM_ACTOR_NAME = "System"
