from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Path = Path(__file__).resolve().parents[2] / "logs"
    LOG_TO_FILE: bool = True


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()
