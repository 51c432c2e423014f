"""
Dice Notation - Application Settings

Loads configuration from environment variables (prefixed ``DICE_``) or a
local ``.env`` file using Pydantic Settings.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Rolling
    default_notation: str = Field(default="20d10r1", min_length=1)
    seed: int | None = None

    # Output
    color: bool = True
    log_level: str = Field(
        default="WARNING",
        pattern=r"^(?i:debug|info|warning|error|critical)$",
    )

    model_config = {
        "env_prefix": "DICE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
