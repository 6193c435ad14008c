from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Core
    ENVIRONMENT: str = Field(default="production")
    LOG_LEVEL: str = Field(default="INFO")

    # MessageBird
    MESSAGEBIRD_ACCESS_KEY: str = Field(default="")
    MESSAGEBIRD_BASE_URL: str = Field(default="https://rest.messagebird.com")
    MESSAGEBIRD_TIMEOUT_S: float = Field(default=20.0)


settings = Settings()
