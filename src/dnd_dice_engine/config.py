from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DND_DICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    server_name: str = "dnd-dice-engine"
    # Only d4, d6, d8, d10, d12, d20 and d100 in tool calls.
    strict: bool = False
    log_level: LogLevel = "WARNING"

    # Upper bounds for a single tool call.
    max_dice: int = 100
    max_sides: int = 1000

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


def load_settings() -> Settings:
    """Read settings from ``DND_DICE_*`` environment variables (and ``.env``)."""
    return Settings()
