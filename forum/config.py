"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseModel):
    """Qiniu object storage configuration."""

    access_key: str = "CHANGE_ME_IN_PRODUCTION"
    secret_key: str = "CHANGE_ME_IN_PRODUCTION"
    bucket: str = "forum"

    # Zone code, one of: z0, z1, z2, na0, as0
    zone: str = "z0"

    # Certificate verification for calls to Qiniu
    # Only disable when talking to the service through an intercepting proxy
    verify_tls: bool = True

    # Host for management requests (delete)
    management_host: str = "rs.qiniu.com"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Loaded from environment variables and an optional .env file.
    Nested values use a double underscore:

        STORAGE__ACCESS_KEY=...
        STORAGE__SECRET_KEY=...
        STORAGE__BUCKET=forum-uploads
        STORAGE__ZONE=z2
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STORAGE__BUCKET syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    storage: StorageSettings = StorageSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
