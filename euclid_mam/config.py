"""
Host settings, read from the environment and an optional .env file.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENVIRONMENTS = ("development", "production", "test")


class Settings(BaseSettings):
    """
    Settings for the host and its plugins.

    `site_url` is the public base for author archive links; `avatar_*`
    control the gravatar images shown next to contributor names.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./euclid_mam.db"

    # Security
    secret_key: str = "change-this-in-production-minimum-32-characters-long"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 1440  # 24 hours
    nonce_lifetime_hours: int = 24

    # Site
    site_url: str = "http://localhost:8000"
    avatar_size: int = 96
    avatar_default: str = "mm"  # mystery person
    avatar_rating: str = "g"

    # Application
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # API Settings
    api_v1_prefix: str = "/api/v1"
    project_name: str = "Multi Author Metabox"
    version: str = "2.0.0"

    @field_validator("site_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("environment")
    @classmethod
    def known_environment(cls, v: str) -> str:
        v = v.lower()
        if v not in ENVIRONMENTS:
            raise ValueError(f"environment must be one of {', '.join(ENVIRONMENTS)}")
        return v

    @field_validator("avatar_size")
    @classmethod
    def positive_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("avatar_size must be positive")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
