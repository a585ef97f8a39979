from datetime import date
from pathlib import Path
import secrets

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]
ENV_FILE = BASE_DIR / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILE, env_file_encoding="utf-8", extra="ignore")

    app_env: str = "dev"
    app_secret_key: str | None = None
    log_level: str = "INFO"

    massive_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("MASSIVE_API_KEY", "POLYGON_API_KEY", "POLY_API_KEY"),
    )
    massive_base_url: str = "https://api.massive.com"
    massive_timeout_seconds: float = 20.0

    top_active_stocks_limit: int = 5

    options_default_multiplier: int = 1
    options_default_timespan: str = "day"
    options_default_from: str = "2023-01-09"
    options_default_to: str = "2023-01-09"

    dashboard_option_expiration: date = date(2025, 12, 19)
    dashboard_option_type: str = "call"
    dashboard_option_strike: float = 650.0

    cors_allow_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    @model_validator(mode="after")
    def _validate_app_secret_key(self) -> "Settings":
        normalized = (self.app_secret_key or "").strip()
        insecure_placeholders = {
            "change-me",
            "changeme",
            "replace-me",
            "replace-with-strong-random-secret",
        }
        is_prod = self.app_env.lower() in {"prod", "production"}

        if not normalized:
            if is_prod:
                raise ValueError("APP_SECRET_KEY is required in production")
            normalized = secrets.token_urlsafe(48)

        if normalized.lower() in insecure_placeholders:
            if is_prod:
                raise ValueError("APP_SECRET_KEY must be replaced with a strong random secret in production")
            normalized = secrets.token_urlsafe(48)

        if len(normalized) < 32:
            raise ValueError("APP_SECRET_KEY must be at least 32 characters")

        self.app_secret_key = normalized
        return self

    @model_validator(mode="after")
    def _validate_top_active_limit(self) -> "Settings":
        if self.top_active_stocks_limit < 1:
            raise ValueError("TOP_ACTIVE_STOCKS_LIMIT must be positive")
        return self


settings = Settings()
