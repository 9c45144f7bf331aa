"""
Configuration Management for the Health Risk Analysis Engine

Environment-based configuration using Pydantic Settings.
"""
from typing import Optional, List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache


# Value shipped in the sample .env; equivalent to "not configured".
PLACEHOLDER_API_KEY = "your_gemini_api_key_here"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_name: str = "VitaGuard Health Risk Analysis"
    app_version: str = "1.0.0"
    log_level: str = Field(default="INFO", description="Root logging level")
    log_file: Optional[str] = None

    # API Configuration
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = ["*"]

    # Gemini
    gemini_api_key: Optional[str] = Field(default=None, description="Google Gemini API key")
    gemini_model: str = "gemini-1.5-flash"
    gemini_temperature: float = 0.4
    gemini_max_output_tokens: int = 2048
    gemini_timeout_seconds: float = Field(default=30.0, description="Upper bound for one Gemini round-trip")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
