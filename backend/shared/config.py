"""
Centralized configuration for the Chirper backend.

All settings are loaded from environment variables with sensible defaults.
Settings are built once at process start and handed to each component's
constructor by the service container; business logic never reads the
environment directly.
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Chirper API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Which routers this process mounts
    service_role: Literal["identity", "posting", "all"] = "all"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 24 * 60

    # Password hashing
    bcrypt_rounds: int = 12

    # Identity directory used by the posting service
    user_directory_url: str = "http://localhost:8000/api"
    user_directory_timeout: float = 3.0  # seconds


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
