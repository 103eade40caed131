"""
Demo configuration, read from PROTODICE_* environment variables or a .env file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DiceSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PROTODICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    sides: int = Field(default=6, gt=0)
    rolls: int = Field(default=5, ge=0)
    source: Literal["uniform", "odd"] = "uniform"
    seed: Optional[int] = None
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level {v!r}")
        return level


@lru_cache
def get_settings() -> DiceSettings:
    return DiceSettings()
