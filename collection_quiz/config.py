"""Configuration management for Collection Quiz.

Loads settings from environment variables and provides validated configuration.
"""

from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="QUIZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Width of the signed integer type used for squares
    integer_bits: int = Field(default=32, ge=2)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @property
    def max_integer(self) -> int:
        """Largest value representable by the configured integer type."""
        return 2 ** (self.integer_bits - 1) - 1


# Global settings instance
settings = Settings()
