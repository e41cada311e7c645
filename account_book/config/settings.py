"""
Configuration Management for Account Book

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here, but only the
application factories read it. The request handler and the storage
backends receive their configuration explicitly, so tests can build them
without touching the environment.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GoogleSheetsSettings(BaseSettings):
    """Google Sheets storage configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_SHEETS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    credentials_path: str = Field(
        ...,
        description="Path to Google service account credentials JSON"
    )
    spreadsheet_id: str = Field(
        ...,
        description="ID of the spreadsheet holding the month sheets"
    )
    sheet_rows: int = Field(
        default=1000,
        ge=10,
        description="Initial row count of a newly created month sheet"
    )

    @field_validator('credentials_path')
    @classmethod
    def validate_credentials_path(cls, v: str) -> str:
        """Warn if credentials file doesn't exist (but don't fail - might be mounted later)."""
        if not Path(v).exists():
            import warnings
            warnings.warn(
                f"Google credentials file not found at {v}. "
                "Make sure it exists before running the application."
            )
        return v


class ApiSettings(BaseSettings):
    """Ledger API server configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    auth_token: str = Field(
        ...,
        min_length=1,
        description="Shared secret every request must carry as authToken"
    )
    host: str = Field(
        default="127.0.0.1",
        description="Interface the API server binds to"
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port the API server listens on"
    )
    storage_backend: Literal["sheets", "memory"] = Field(
        default="sheets",
        description="Where month sheets live (memory is for local development)"
    )
    log_level: str = Field(
        default="INFO",
        description="Standard logging level name"
    )


class ClientAppSettings(BaseSettings):
    """Settings of the form UI process (not the user-editable settings)."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_CLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    settings_path: str = Field(
        default=str(Path.home() / ".account_book" / "settings.json"),
        description="Where the user-editable settings are stored locally"
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Network timeout for a single API call"
    )


class Settings:
    """
    Root settings container.

    Sub-settings are loaded lazily so the client UI can run without the
    server's secrets and vice versa.
    """

    @property
    def google_sheets(self) -> GoogleSheetsSettings:
        return GoogleSheetsSettings()

    @property
    def api(self) -> ApiSettings:
        return ApiSettings()

    @property
    def client(self) -> ClientAppSettings:
        return ClientAppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()

