# app/config/database_config.py
from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    """Persistent store configuration settings."""

    path: str = "rides.db"
    timeout: float = 5.0

    class Config:
        env_file = ".env"
        env_prefix = "DB_"
        extra = "ignore"
