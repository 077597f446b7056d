# app/config/app_config.py
from dataclasses import dataclass
from typing import List

from pydantic_settings import BaseSettings

from app.config.auth_config import AuthSettings
from app.config.database_config import DatabaseSettings


class AppSettings(BaseSettings):
    """General application settings."""

    title: str = "Rides Backend"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        env_prefix = "APP_"
        extra = "ignore"


@dataclass(frozen=True)
class Settings:
    """All configuration, built once at startup and passed to create_app."""
    app: AppSettings
    auth: AuthSettings
    database: DatabaseSettings


def load_settings() -> Settings:
    """Read every settings group from the environment (and .env)."""
    return Settings(
        app=AppSettings(),
        auth=AuthSettings(),
        database=DatabaseSettings(),
    )
