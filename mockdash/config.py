from pathlib import Path
from typing import Optional, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# =========================
# Configuration (ENV-DRIVEN via Pydantic)
# =========================


class Settings(BaseSettings):
    """Application settings read from environment and validated by Pydantic.

    Only a single `.env` file at the project root is read. Real environment
    variables always take precedence over `.env` values.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        populate_by_name=True,
        case_sensitive=False,
        env_file=str(Path(__file__).resolve().parent.parent / ".env"),
        env_file_encoding="utf-8",
    )

    # App
    app_title: str = Field(default="Mock Analytics API", alias="APP_TITLE")
    app_env: Literal["dev", "production"] = Field(default="dev", alias="APP_ENV")
    port: int = Field(default=3001, ge=1, le=65535, alias="PORT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", alias="LOG_LEVEL")

    # Mock data
    events_pool_size: int = Field(default=50, ge=1, alias="EVENTS_POOL_SIZE")
    events_max_limit: int = Field(default=1000, ge=1, alias="EVENTS_MAX_LIMIT")

    # Response cache
    cache_type: Literal["SimpleCache", "RedisCache", "NullCache"] = Field(default="SimpleCache", alias="CACHE_TYPE")
    cache_timeout_seconds: int = Field(default=300, ge=0, alias="CACHE_TIMEOUT_SECONDS")
    events_cache_timeout_seconds: int = Field(default=60, ge=0, alias="EVENTS_CACHE_TIMEOUT_SECONDS")
    cache_threshold: int = Field(default=1000, ge=1, alias="CACHE_THRESHOLD")
    redis_url: Optional[str] = Field(default=None, alias="REDIS_URL")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("app_env", mode="before")
    @classmethod
    def _lower_app_env(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v


# Singleton accessor to avoid repeated disk reads/parsing
_settings_singleton: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the singleton Settings instance, initializing it on first call."""
    global _settings_singleton
    if _settings_singleton is None:
        _settings_singleton = Settings()
    return _settings_singleton


# Convenience module-level constants used by app.py when running as a script
PORT: int = get_settings().port
DEBUG: bool = get_settings().debug
