"""
Centralized configuration for the Product Catalog backend.

All settings are loaded from environment variables with sensible defaults.
Every variable is prefixed with CATALOG_ (e.g., CATALOG_JWT_SECRET).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CATALOG_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Product Catalog API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # Direct Postgres URL, used by run_migrations.py
    supabase_timeout_seconds: float = 10.0

    # JWT
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_ttl_minutes: int = 60

    # Seeded admin identity (seed.py)
    seed_admin_name: str = "Admin User"
    seed_admin_email: str = "admin@example.com"
    seed_admin_password: str = "password123"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
