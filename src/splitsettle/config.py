from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    log_level: str = Field("INFO", alias="SPLITSETTLE_LOG_LEVEL")
    # Largest absolute total or balance accepted, signed 64-bit by default.
    max_amount: int = Field(2**63 - 1, alias="SPLITSETTLE_MAX_AMOUNT", gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
