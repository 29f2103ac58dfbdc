"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Run log, relative paths resolve against the working directory
    log_file: Path = Path("organizer.log")

    model_config = SettingsConfigDict(
        env_prefix="TIDY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields from .env
    )


def get_settings() -> Settings:
    """Load settings from the environment."""
    return Settings()
