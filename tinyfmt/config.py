"""
Formatter configuration management.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from TINYFMT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TINYFMT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"

    # Input
    default_input: str = "index.ts"
    default_language: str = "javascript"


# Global settings instance
settings = Settings()
