"""Application configuration for the SEIAC live coordination service."""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    TEACHER_PASSWORD: str = Field(
        default="seiac-teacher", description="Shared password for the teacher live panel"
    )
    DEBUG: bool = Field(default=False, description="Enable FastAPI debug mode")
    SESSION_DURATION_HOURS: int = Field(default=8, ge=1, description="Teacher session lifetime")
    LIVE_MESSAGE_TTL_MS: int = Field(
        default=90_000, ge=1, description="Default lifetime of a live message"
    )
    LIVE_BLOCK_DEFAULT_MINUTES: int = Field(
        default=10, ge=1, description="Default length of a student block"
    )
    LIVE_SWEEP_INTERVAL_SECONDS: int = Field(
        default=60, ge=0, description="Period of the background sweep, 0 disables it"
    )
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["*"])

    model_config = {
        "env_file": ".env",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached instance of the application settings."""
    return Settings()
