"""Runtime settings read from ``CHRONICLER_*`` environment variables or ``.env``."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chronicler.core.upload import DEFAULT_CONTENT_TYPES, UploadOptions


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHRONICLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    max_upload_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
    allowed_extensions: list[str] = Field(default_factory=lambda: [".txt"])
    cors_origin: str = "http://localhost:3000"
    log_level: str = "INFO"
    default_language: str = "english"

    # HTTP client
    api_url: str = "http://127.0.0.1:8000"
    request_timeout_seconds: float = Field(default=30.0, gt=0)
    retry_attempts: int = Field(default=3, ge=0)
    retry_delay_seconds: float = Field(default=1.0, ge=0)

    def upload_options(self) -> UploadOptions:
        return UploadOptions(
            max_bytes=self.max_upload_bytes,
            allowed_extensions=tuple(ext.lower() for ext in self.allowed_extensions),
            allowed_content_types=DEFAULT_CONTENT_TYPES,
        )


def get_settings() -> Settings:
    return Settings()
