from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    email_validation_enabled: bool = Field(default=True, alias="EMAIL_VALIDATION_ENABLED")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
