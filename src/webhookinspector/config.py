"""Конфігурація сидера через pydantic-settings."""
from __future__ import annotations

from functools import lru_cache

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Налаштування наповнення таблиці вебхуків."""

    database_url: str | None = Field(None, alias="DATABASE_URL")
    seed_count: int = Field(60, alias="SEED_COUNT", ge=1)
    seed_dry_run: bool = Field(False, alias="SEED_DRY_RUN")
    seed_create_tables: bool = Field(False, alias="SEED_CREATE_TABLES")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str | None) -> str:
        if not value:
            return "INFO"
        level = str(value).strip().upper()
        # loguru піднімає ValueError для невідомого рівня
        logger.level(level)
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Повертає кешований екземпляр налаштувань."""

    return Settings()


__all__ = ["Settings", "get_settings"]
