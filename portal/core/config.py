"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (BACKEND_URL, BACKEND_ANON_KEY,
BACKEND_JWT_SECRET) are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except those validated in
    validate_required (backend_url, backend_anon_key, backend_jwt_secret).
    """

    # App
    app_name: str = "portal"
    app_version: str = "1.0.0"
    debug: bool = False

    # Hosted backend (REST query service + auth)
    backend_url: str = ""
    backend_anon_key: SecretStr = SecretStr("")
    backend_timeout_seconds: float = 30.0

    # Access tokens issued by the hosted auth service
    backend_jwt_secret: SecretStr = SecretStr("")
    jwt_algorithm: str = "HS256"
    jwt_audience: str = "authenticated"

    # Analytics
    analytics_window_months: int = 6
    analytics_recent_limit: int = 10
    analytics_rate_limit: str = "60/minute"

    # CORS
    allowed_origins: str = "http://localhost:3000"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"

    # OpenTelemetry
    telemetry_enabled: bool = True
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
    def validate_required(self) -> "Settings":
        """Validate required backend connection settings."""
        if not self.backend_url:
            raise ValueError(
                "BACKEND_URL is required (e.g. https://<project>.supabase.co). "
                "Set in environment or .env file."
            )
        if not self.backend_anon_key.get_secret_value():
            raise ValueError(
                "BACKEND_ANON_KEY is required. Copy the anon/public API key "
                "from the backend project settings."
            )
        if not self.backend_jwt_secret.get_secret_value():
            raise ValueError(
                "BACKEND_JWT_SECRET is required to verify access tokens. "
                "Copy the JWT secret from the backend project settings."
            )
        if self.analytics_window_months < 1:
            raise ValueError("ANALYTICS_WINDOW_MONTHS must be at least 1")
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
