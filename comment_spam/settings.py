"""Application settings configuration module.

Defines the Settings class that manages environment-based
configuration using pydantic-settings.
"""
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import (
    BaseSettings,  # pydantic-settings v2
    SettingsConfigDict,
    )


class Settings(BaseSettings):
    """Runtime configuration read from environment variables.

    Latency values are in milliseconds and simulate a remote model call.
    """
    model_config = SettingsConfigDict(env_prefix="COMMENT_SPAM_", extra="ignore")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    single_delay_min_ms: int = Field(default=1000, ge=0)
    single_delay_max_ms: int = Field(default=2000, ge=0)
    batch_delay_ms: int = Field(default=2000, ge=0)

    @model_validator(mode="after")
    def _check_delay_window(self) -> "Settings":
        if self.single_delay_max_ms < self.single_delay_min_ms:
            raise ValueError("single_delay_max_ms must be >= single_delay_min_ms")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
