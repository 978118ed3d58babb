"""Application configuration management."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    app_name: str = "SRT Parser Service"
    app_version: str = "0.1.0"
    app_description: str = "Parse SRT subtitle files into structured subtitle entries"

    # Environment
    environment: str = "development"  # development, staging, production

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000

    # Authentication
    api_key: str | None = None

    # CORS Configuration
    cors_enabled: bool = True
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Input Limits
    default_encoding: str = "utf-8"
    max_file_size: int = 10_485_760  # 10MB in bytes
    allowed_extensions: set[str] = {".srt"}

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "./logs"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
