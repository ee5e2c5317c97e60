"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Backend choices (record store, event bus) are
validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except the Firestore credentials,
    which are required when database_backend is 'firestore'.
    """

    # App
    app_name: str = "audit-trail"
    app_version: str = "1.0.0"
    debug: bool = False

    # Record store: "firestore" (document database) or "memory" (process-local substitute)
    database_backend: str = "firestore"

    # Firebase / Firestore: use key (env) or path (file).
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None
    firestore_timeout_seconds: float = 30.0

    # Event bus: "memory" (in-process asyncio) or "redis" (pub/sub across processes)
    event_bus_backend: str = "memory"
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    redis_channel_prefix: str = "domain_events"
    # Pause before the listener resubscribes after losing its connection.
    redis_listener_retry_seconds: float = 5.0

    # Audit trail
    # Subscribe the dispatch handler to domain events at startup. Turn off for
    # test runs and alternate stores so publishing never writes audit history.
    # With the redis bus every listening process records each event it receives:
    # enable this on exactly one audit worker, never on every replica.
    audit_subscriptions_enabled: bool = True
    audit_default_page_size: int = 20
    audit_max_page_size: int = 100

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_backends(self) -> "Settings":
        """Validate record store and event bus backends.

        - Firestore: FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH required.
        - Memory: no credentials; history is lost on restart.
        """
        if self.database_backend == "firestore":
            has_key = (
                self.firebase_service_account_key
                and self.firebase_service_account_key.get_secret_value()
            )
            if not has_key and not self.firebase_service_account_path:
                raise ValueError(
                    "When database_backend is 'firestore', set FIREBASE_SERVICE_ACCOUNT_KEY (full JSON string) "
                    "or FIREBASE_SERVICE_ACCOUNT_PATH (path to JSON file)."
                )
        elif self.database_backend != "memory":
            raise ValueError(
                f"database_backend must be 'firestore' or 'memory', got: {self.database_backend!r}"
            )
        if self.event_bus_backend not in ("memory", "redis"):
            raise ValueError(
                f"event_bus_backend must be 'memory' or 'redis', got: {self.event_bus_backend!r}"
            )
        if self.audit_default_page_size < 1:
            raise ValueError("audit_default_page_size must be at least 1")
        if self.audit_max_page_size < self.audit_default_page_size:
            raise ValueError(
                "audit_max_page_size must be greater than or equal to audit_default_page_size"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
