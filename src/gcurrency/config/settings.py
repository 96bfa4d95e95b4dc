# src/gcurrency/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or an optional .env file.

Files that USE this module:
- gcurrency.adapters.providers.google (endpoint location, language, timeout)
- gcurrency.shared.logging_conf (logging defaults)

Files that this module USES:
- None (configuration only)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Quote endpoint ---
    service_scheme: str = Field(default="http", alias="GCURRENCY_SERVICE_SCHEME")
    service_host: str = Field(default="www.google.com", alias="GCURRENCY_SERVICE_HOST")
    service_path: str = Field(default="/ig/calculator", alias="GCURRENCY_SERVICE_PATH")
    service_language: str = Field(default="en", alias="GCURRENCY_SERVICE_LANGUAGE")

    # --- HTTP Settings ---
    # None means no timeout; a hung request then holds the cache lock
    http_timeout_seconds: Optional[float] = Field(default=None, alias="HTTP_TIMEOUT_SECONDS", gt=0)

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="GCURRENCY_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def service_url(self) -> str:
        """Quote endpoint URL without query string."""
        return f"{self.service_scheme}://{self.service_host}{self.service_path}"

    @field_validator("service_scheme")
    @classmethod
    def validate_scheme(cls, v: str) -> str:
        """Only plain HTTP(S) endpoints are supported."""
        v = v.lower()
        if v not in ["http", "https"]:
            raise ValueError("GCURRENCY_SERVICE_SCHEME must be 'http' or 'https'")
        return v

    @field_validator("service_host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        v = v.strip()
        if not v or "/" in v:
            raise ValueError("GCURRENCY_SERVICE_HOST must be a bare host name")
        return v

    @field_validator("service_path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("GCURRENCY_SERVICE_PATH must start with '/'")
        return v


# Global settings instance
settings = Settings()
