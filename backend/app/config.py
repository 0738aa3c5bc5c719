"""Application configuration loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str = "sqlite:///./workout_tracker.db"

    # Logging
    LOG_LEVEL: str = "INFO"

    # IANA timezone used to decide what "today" is for workout dates
    APP_TIMEZONE: str = "UTC"

    # Number of finished workouts returned by the history endpoint
    HISTORY_LIMIT: int = 30

    # Frontend URL for CORS
    FRONTEND_URL: str = "http://localhost:5173"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Create a global settings instance for direct import
settings = get_settings()
