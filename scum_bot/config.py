"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    database_url: str = "sqlite:///scum_bot.db"

    # Commands
    command_prefix: str = "!"
    bot_id: str | None = None  # User ID the bot is mentioned by, e.g. <@1234>

    # ==========================================================================
    # Spelling Correction
    # ==========================================================================
    # None = use the game vocabulary shipped in scum_bot/data/dictionary.txt
    spelling_dictionary_path: str | None = None
    spelling_use_english_dictionary: bool = True
    spelling_max_edit_distance: int = 2

    # Debug
    debug: bool = False
    log_level: LogLevel = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
