from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class GlossarySettings(BaseSettings):
    # Date display
    SHORT_DATE_FORMAT: str = "%d/%m/%Y"

    # List sorting (single column only)
    DEFAULT_SORT_FIELD: str = "src_content"

    model_config = SettingsConfigDict(
        env_prefix="GLOSSARY_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache
def get_settings() -> GlossarySettings:
    """Cached settings instance"""
    return GlossarySettings()
