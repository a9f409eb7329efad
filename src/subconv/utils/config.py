"""Library configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``SUBCONV_``-prefixed environment variables.

    Attributes:
        encoding: Codec used to decode subtitle bytes when none is given
        log_level: Standard logging level name for ``setup_logging``
        log_json: Render log events as JSON instead of console output
    """

    encoding: str = "utf-8-sig"
    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="SUBCONV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached library settings.

    Returns:
        Settings instance loaded from environment

    Note:
        Settings are cached. Use get_settings.cache_clear() to reload
        settings in tests.
    """
    return Settings()
