# pricing_gateway/shared/config.py
from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "storefront-pricing-gateway"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False
    CORS_ORIGINS: List[str] = ["*"]

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "pricing-gateway"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None
    # Comma separated URL patterns kept out of request tracing.
    OTEL_EXCLUDED_URLS: str = "health/live,health/ready"

    # --- Upstream Pricing Service ---
    PRICING_API_URL: str = "http://localhost:8000"
    # Upper bound for a single upstream call; expiry counts as a transport failure.
    PRICING_API_TIMEOUT: float = 10.0
    PRICING_API_HEALTH_PATH: str = "/health"
    # Header the upstream reads the caller token from.
    PRICING_API_SESSION_HEADER: str = "X-Session-ID"

    # --- Session Identity ---
    SESSION_COOKIE_NAME: str = "session_id"
    SESSION_HEADER_NAME: str = "X-Session-ID"

    # --- Locale Routing ---
    SUPPORTED_LOCALES: List[str] = ["de", "en"]
    DEFAULT_LOCALE: str = "de"
    LOCALE_COOKIE_NAME: str = "locale"
    LOCALE_COOKIE_MAX_AGE: int = 60 * 60 * 24 * 365
    ROOT_REDIRECT_PATH: str = "/landing"
    DIRECT_ROUTE_PREFIXES: List[str] = ["/dashboard", "/landing", "/admin"]

    @property
    def pricing_api_base(self) -> str:
        """Upstream base URL without a trailing slash."""
        return self.PRICING_API_URL.rstrip("/")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
