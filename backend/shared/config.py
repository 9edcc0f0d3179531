"""
Centralized configuration for the Accounts backend.

All settings are loaded from environment variables with sensible defaults.
Every variable is prefixed with ACCOUNTS_ (e.g. ACCOUNTS_JWT_SECRET).
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ACCOUNTS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Accounts API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Database
    database_url: str = "sqlite:///./accounts.db"
    database_echo: bool = False
    auto_create_schema: bool = False
    migrations_database_url: str = ""  # PostgreSQL URI used by run_migrations.py

    # Tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expiry_minutes: Optional[int] = None  # None issues tokens without exp

    # API key gate
    api_key_header: str = "x-api-key"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
