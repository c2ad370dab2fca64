"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Settings are resolved once per process and passed
explicitly into use cases through the composition root; nothing below
the API layer reads them as ambient state.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Every field has a default so the app (and the test suite) can start
    with an empty environment; validate_storage only enforces the fields a
    selected backend cannot work without.
    """

    # App
    app_name: str = "taxwise"
    app_version: str = "1.0.0"
    debug: bool = False

    # Export packages: archive filenames are <export_archive_prefix>_export_<category>_...
    export_archive_prefix: str = "taxwise"

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:9002"

    # Object storage for reference documents: "firebase" (Firebase Storage REST) or "local"
    storage_backend: str = "local"
    storage_root: str = "./var/storage"
    firebase_storage_bucket: str | None = None

    # Firebase / Firestore: use key (env) or path (file).
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None

    # Outbound HTTP (signed URL downloads, Google REST APIs)
    http_fetch_timeout_seconds: float = 30.0

    # Seconds before a pending audit write is abandoned
    audit_write_timeout_seconds: float = 5.0

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"

    # Admin endpoints (audit log). When set, X-Admin-Key must match.
    admin_api_key: SecretStr | None = None

    # Language model used for deduction suggestions
    llm_provider: str = "openai"
    openai_api_key: SecretStr | None = None
    openai_base_url: str | None = None
    llm_model: str = "gpt-4o-mini"
    llm_temperature: float = 0.2
    llm_max_tokens: int = 2048

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_storage(self) -> "Settings":
        """Validate the reference-document storage backend.

        - firebase: FIREBASE_STORAGE_BUCKET required (credentials come from the
          same service account as Firestore).
        - local: STORAGE_ROOT required.
        """
        backend = self.storage_backend.lower()
        if backend == "firebase":
            if not self.firebase_storage_bucket:
                raise ValueError(
                    "FIREBASE_STORAGE_BUCKET is required when storage_backend is 'firebase' "
                    "(e.g. my-project.appspot.com)."
                )
        elif backend == "local":
            if not self.storage_root:
                raise ValueError("STORAGE_ROOT is required when storage_backend is 'local'.")
        else:
            raise ValueError(
                f"Invalid storage_backend '{self.storage_backend}'. "
                "Must be one of: 'firebase', 'local'"
            )
        if self.llm_provider != "openai":
            raise ValueError(
                f"llm_provider must be 'openai', got: {self.llm_provider!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars so
    the next get_settings() uses the new values.
    """
    return Settings()
