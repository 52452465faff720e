"""Application configuration."""

import logging
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutriscore.domain.scoring import ProductCategory

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    debug: bool = False
    default_category: ProductCategory = ProductCategory.FOOD

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_log_level(raw: str | None) -> str:
    """Normalize a logging level name, falling back to INFO."""
    if raw is None:
        return "INFO"
    cleaned = raw.strip().upper()
    if cleaned not in logging.getLevelNamesMapping():
        return "INFO"
    return cleaned
