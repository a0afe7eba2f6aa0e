"""Configuration loaded from environment variables and an optional .env file."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Runtime settings for step_dict.

    Attributes:
        word_list: Path to an external sorted word list (for example
            words_alpha.txt). When unset the bundled list is used.
        log_level: Minimum loguru level for configure_logging.
    """

    model_config = SettingsConfigDict(
        env_prefix="STEP_DICT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    word_list: str | None = None
    log_level: str = "WARNING"

    @field_validator("word_list")
    @classmethod
    def strip_word_list(cls, value: str | None) -> str | None:
        """Strip whitespace; a blank path means no external list."""
        if value is None:
            return None
        value = value.strip()
        return value or None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}"
            raise ValueError(msg)
        return value


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings instance."""
    return Settings()
