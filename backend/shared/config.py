"""
Centralized configuration for the ProSocial backend.

All settings are loaded from environment variables with sensible defaults.
Store-specific settings are namespaced (e.g., SUPABASE_*, MONGODB_*, JWT_*).
"""

from functools import lru_cache
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
    app_name: str = "ProSocial API"
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

    # Supabase (relational store + avatar storage)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URI, used by run_migrations.py
    avatar_bucket: str = "avatars"
    max_avatar_bytes: int = 5 * 1024 * 1024

    # MongoDB (document store)
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_database: str = "pro_social_db"

    # Tokens
    jwt_secret: str = ""
    jwt_issuer: str = "ProSocialApi"
    jwt_audience: str = "ProSocialApiUsers"
    jwt_expires_in_days: int = 7
    auth_cookie_name: str = "access_token"
    auth_cookie_secure: bool = False

    # Password hashing cost
    bcrypt_rounds: int = 12


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
