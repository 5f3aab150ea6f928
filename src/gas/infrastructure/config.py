"""Runtime settings, read from ``GAS_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    """Application settings from env."""

    model_config = SettingsConfigDict(
        env_prefix="GAS_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Directory holding products.json, orders.json and bookings.json
    DATA_DIR: Path = _DEFAULT_DATA_DIR

    # Display conventions for prices and quantities ("it" or "en")
    LOCALE: str = "it"

    LOG_LEVEL: str = "WARNING"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, v: object) -> str:
        return str(v or "WARNING").strip().upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
