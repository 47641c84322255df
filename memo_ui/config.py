# FILE: memo_ui/config.py
"""
Configuration for the Memo UI
Only what the Streamlit front end needs to reach the API
"""
import logging
from typing import Optional
from pydantic import Field, validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class UISettings(BaseSettings):
    """UI settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    memo_api_url: str = Field(default="http://localhost:8000", alias="MEMO_API_URL")
    memo_api_timeout: float = Field(default=10.0, alias="MEMO_API_TIMEOUT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @validator("memo_api_timeout")
    def validate_memo_api_timeout(cls, v):
        if v <= 0:
            raise ValueError("memo_api_timeout must be positive")
        return v

    @validator("log_level")
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level


_settings: Optional[UISettings] = None


def get_ui_settings() -> UISettings:
    """Get or create singleton UI settings instance"""
    global _settings
    if _settings is None:
        _settings = UISettings()
    return _settings


def configure_logging():
    """Apply LOG_LEVEL to the root logger"""
    logging.basicConfig(level=get_ui_settings().log_level, format=LOG_FORMAT)
