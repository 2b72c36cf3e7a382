from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# services/api/app/core/config.py -> BASE_DIR == services/api
BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        extra="ignore",
        env_prefix="",
        case_sensitive=False,
    )

    # Environment
    env: str = Field(default="dev", validation_alias="ENV")

    # Application
    api_name: str = Field(default="venue-api", validation_alias="API_NAME")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    venue_name: str = Field(
        default="DELIGHT CONVENTION CENTER", validation_alias="VENUE_NAME"
    )

    # Database & cache
    database_url: str = Field(
        default="sqlite+pysqlite:///./venue.db",
        validation_alias="DATABASE_URL",
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0", validation_alias="REDIS_URL"
    )

    # Availability
    alternative_search_horizon_days: int = Field(
        default=365, ge=0, validation_alias="ALTERNATIVE_SEARCH_HORIZON_DAYS"
    )
    alternative_suggestion_limit: int = Field(
        default=5, ge=0, validation_alias="ALTERNATIVE_SUGGESTION_LIMIT"
    )

    # Documents (default pricing when a booking carries none)
    quote_venue_cost: int = Field(default=5000, validation_alias="QUOTE_VENUE_COST")
    quote_additional_services: int = Field(
        default=1500, validation_alias="QUOTE_ADDITIONAL_SERVICES"
    )

    # Auth
    auth_secret_key: str = Field(
        default="dev-secret-key", validation_alias="AUTH_SECRET_KEY"
    )
    auth_algorithm: str = Field(default="HS256", validation_alias="AUTH_ALGORITHM")
    auth_access_token_ttl_minutes: int = Field(
        default=60, validation_alias="AUTH_ACCESS_TOKEN_TTL_MINUTES"
    )
    auth_cookie_name: str = Field(
        default="venue_admin", validation_alias="AUTH_COOKIE_NAME"
    )
    auth_cookie_samesite: Literal["lax", "strict", "none"] = Field(
        default="lax", validation_alias="AUTH_COOKIE_SAMESITE"
    )
    auth_cookie_secure: bool = Field(
        default=False, validation_alias="AUTH_COOKIE_SECURE"
    )

    @field_validator("auth_cookie_samesite", mode="before")
    @classmethod
    def normalize_cookie_samesite(cls, v: Any) -> Literal["lax", "strict", "none"]:
        if v is None:
            return "lax"
        if not isinstance(v, str):
            raise TypeError("AUTH_COOKIE_SAMESITE must be a string")
        s = v.strip().lower()
        if s not in {"lax", "strict", "none"}:
            raise ValueError("AUTH_COOKIE_SAMESITE must be one of: lax, strict, none")
        return s  # type: ignore[return-value]

    # Demo admin (dev only)
    demo_admin_username: str = Field(
        default="admin", validation_alias="DEMO_ADMIN_USERNAME"
    )
    demo_admin_password: str = Field(
        default="admin123", validation_alias="DEMO_ADMIN_PASSWORD"
    )
    demo_login_enabled: bool = Field(
        default=True, validation_alias="DEMO_LOGIN_ENABLED"
    )

    # CORS
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        validation_alias="CORS_ORIGINS",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> list[str]:
        """
        Supported env formats:
          - JSON list: '["http://localhost:5173"]'
          - Bracket list (no quotes): '[http://localhost:5173, http://localhost:8080]'
          - Comma-separated: 'http://localhost:5173, http://localhost:8080'
          - '*' wildcard
        """
        if v is None:
            return []
        if isinstance(v, list):
            return [str(x).strip() for x in v if str(x).strip()]
        if not isinstance(v, str):
            raise TypeError("cors_origins must be a string or list of strings")

        s = v.strip()
        if not s:
            return []
        if s == "*":
            return ["*"]

        if s.startswith("[") and s.endswith("]"):
            try:
                parsed = json.loads(s)
                if isinstance(parsed, list):
                    return [str(x).strip() for x in parsed if str(x).strip()]
            except json.JSONDecodeError:
                # Bracket list without quotes
                inner = s[1:-1].strip()
                if not inner:
                    return []
                parts = [p.strip().strip('"').strip("'") for p in inner.split(",")]
                return [p for p in parts if p]

        parts = [p.strip() for p in s.split(",")]
        return [p for p in parts if p]

    # Rate limiting
    rate_limit_enabled: bool = Field(default=True, validation_alias="RATE_LIMIT_ENABLED")
    rate_limit_window_seconds: int = Field(
        default=60, validation_alias="RATE_LIMIT_WINDOW_SECONDS"
    )
    rate_limit_bookings_per_window: int = Field(
        default=10, validation_alias="RATE_LIMIT_BOOKINGS_PER_WINDOW"
    )
    rate_limit_login_per_window: int = Field(
        default=5, validation_alias="RATE_LIMIT_LOGIN_PER_WINDOW"
    )

    # OpenTelemetry
    otel_enabled: bool = Field(default=False, validation_alias="OTEL_ENABLED")
    otel_otlp_endpoint: str = Field(
        default="http://localhost:4317",
        validation_alias="OTEL_OTLP_ENDPOINT",
    )

    @property
    def is_dev(self) -> bool:
        return self.env in {"local", "development", "dev", "test"}


settings = Settings()
