from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WHATSAPP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Graph API
    api_url: str = "https://graph.facebook.com"
    api_version: str = "v21.0"
    access_token: str = ""
    timeout: float = 30.0

    # Webhooks
    app_secret: str = ""
    webhook_verify_token: str = ""

    # Applied to the "whatsapp_cloud" logger only when set
    log_level: str | None = None

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def base_url(self) -> str:
        """Versioned Graph API root, e.g. https://graph.facebook.com/v21.0/"""
        return f"{self.api_url}/{self.api_version.strip('/')}/"


settings = Settings()
