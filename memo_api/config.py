# FILE: memo_api/config.py
"""
Configuration management for the Memo API
Loads from environment variables with validation
"""
import logging
from typing import List, Optional
from pydantic import Field, validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Backend server
    backend_host: str = Field(default="0.0.0.0", alias="BACKEND_HOST")
    backend_port: int = Field(default=8000, alias="BACKEND_PORT")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Security
    body_size_limit_kb: int = Field(
        default=64,
        alias="BODY_SIZE_LIMIT_KB",
        description="Largest accepted POST/PUT body. Memos are tiny, so a few KB is plenty."
    )

    # CORS
    cors_origins: List[str] = Field(default=["http://localhost:8501"], alias="CORS_ORIGINS")

    # Validators
    @validator("log_level")
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @validator("body_size_limit_kb")
    def validate_body_size_limit(cls, v):
        if v < 1:
            raise ValueError("body_size_limit_kb must be at least 1")
        return v


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create singleton settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings():
    """Reload settings (useful for testing)"""
    global _settings
    _settings = None
    return get_settings()


def configure_logging(level: Optional[str] = None):
    """Apply LOG_LEVEL to the root logger"""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format=LOG_FORMAT
    )
