# battery_engine_tou/settings.py

from __future__ import annotations
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service-instellingen, overschrijfbaar via BATTERY_ENGINE_* env vars."""

    model_config = SettingsConfigDict(env_prefix="BATTERY_ENGINE_")

    cors_origins: List[str] = Field(
        default=["https://thuisbatterij-calculator-web.onrender.com"],
        description="Toegelaten origins voor de frontend",
    )
    log_level: str = Field(default="INFO", description="Logniveau van de service")


@lru_cache
def get_settings() -> Settings:
    return Settings()
