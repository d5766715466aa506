"""Frontend configuration using pydantic-settings."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class FrontendSettings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Backend
    api_base_url: str = "http://localhost:8000/api"
    request_timeout_seconds: float = 10.0

    # Logging
    log_level: str = "INFO"


settings = FrontendSettings()
