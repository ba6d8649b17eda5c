"""
settings.py
===========
Application settings, loaded from ASTRAL_* environment variables or a
local .env file.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ASTRAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    app_name:          str = "Astral Report Engine"
    app_version:       str = "1.0.0"
    cors_origins:      List[str] = ["*"]
    log_level:         str = "INFO"
    log_json:          bool = False

    # Seed for the demonstration Ascendant nakshatra; unset means unseeded
    nakshatra_seed:    Optional[int] = None
    default_is_male:   bool = True
    fortune_longitude: float = 120.0


@lru_cache
def get_settings() -> Settings:
    return Settings()
