# discount_desk/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"

    # --- Admin ---
    ADMIN_PASSCODE: Optional[str] = None
    ADMIN_AUTH_RATE_LIMIT: str = "10/minute"

    # --- Remote config store (Supabase REST) ---
    SUPABASE_URL: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None
    CONFIG_APP_ID: str = "discount-app"
    REMOTE_TIMEOUT_SEC: float = 10.0

    # --- Local fallback cache ---
    CONFIG_CACHE_PATH: str = "./.local_cache/discount_config_v2.json"

    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def remote_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_ROLE_KEY)


settings = Settings()
