"""Configuration settings for the pinstats application."""

from __future__ import annotations

from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # IFPA API Configuration
    ifpa_api_key: str = Field(default="", description="IFPA API key (query param)")
    ifpa_api_base: str = Field(default="https://api.ifpapinball.com")

    # Match Play API Configuration
    matchplay_api_token: str = Field(
        default="", description="Bearer token for Match Play tournament endpoints"
    )
    matchplay_api_base: str = Field(default="https://app.matchplay.events/api")

    # Transport Configuration
    http_timeout_seconds: float = Field(default=10.0, gt=0)
    http_retries: int = Field(default=2, ge=0)
    http_retry_delay_seconds: float = Field(default=1.0, ge=0)

    # Caching and rate limiting
    dashboard_cache_ttl_seconds: int = Field(default=900, gt=0)  # 15 minutes
    rate_limit_max_requests: int = Field(default=10, gt=0)
    rate_limit_window_seconds: int = Field(default=60, gt=0)

    # Opponent history
    recent_events_limit: int = Field(default=5, gt=0)

    # Defaults for the single-provider endpoints
    default_ifpa_player_id: Optional[int] = Field(default=67715)
    default_matchplay_user_id: Optional[int] = Field(default=37737)

    # Application Configuration
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    slow_request_threshold_seconds: float = Field(default=2.0, gt=0)

    # CORS Configuration
    cors_origins: str = Field(default="http://localhost:3000,http://127.0.0.1:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [
            origin.strip() for origin in self.cors_origins.split(",") if origin.strip()
        ]

    @field_validator("ifpa_api_key", "matchplay_api_token")
    @classmethod
    def strip_credentials(cls, v: str) -> str:
        """Trim whitespace that commonly sneaks into pasted credentials."""
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level and reject unknown names."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix for environment variables
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
