"""Configuration management using Pydantic settings."""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List
from functools import lru_cache


class EngineSettings(BaseSettings):
    """Default prompt parameters and orchestration switches."""

    default_audience: str = Field("intermediate", alias="PF_DEFAULT_AUDIENCE")
    default_tone: str = Field("professional", alias="PF_DEFAULT_TONE")
    default_format: str = Field("article", alias="PF_DEFAULT_FORMAT")
    default_word_count: int = Field(800, alias="PF_DEFAULT_WORD_COUNT")
    auto_save: bool = Field(True, alias="PF_AUTO_SAVE")

    model_config = {"env_prefix": "", "extra": "ignore"}


class StorageSettings(BaseSettings):
    """Prompt library configuration."""

    backend: str = Field("file", alias="PF_STORAGE_BACKEND")
    path: str = Field("./prompts.json", alias="PF_STORAGE_PATH")

    model_config = {"env_prefix": "", "extra": "ignore"}


class APISettings(BaseSettings):
    """API server configuration."""

    host: str = Field("0.0.0.0", alias="PF_API_HOST")
    port: int = Field(8000, alias="PF_API_PORT")
    debug: bool = Field(False, alias="PF_DEBUG")
    cors_origins: List[str] = Field(["*"], alias="PF_CORS_ORIGINS")

    model_config = {"env_prefix": "", "extra": "ignore"}


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field("INFO", alias="PF_LOG_LEVEL")
    format: str = Field("text", alias="PF_LOG_FORMAT")

    model_config = {"env_prefix": "", "extra": "ignore"}


class Settings(BaseSettings):
    """Root configuration aggregating all settings."""

    engine: EngineSettings = Field(default_factory=EngineSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    api: APISettings = Field(default_factory=APISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {
        "env_file": ".env",
        "env_nested_delimiter": "__",
        "extra": "ignore"
    }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reload_settings() -> Settings:
    """Reload settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
