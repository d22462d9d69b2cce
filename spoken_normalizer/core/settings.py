from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from spoken_normalizer.core.constants import DEFAULT_TIME_ZONE


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Spoken Normalizer API", alias="APP_NAME")
    app_env: str = Field(default="local", alias="APP_ENV")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    normalizer_token: str | None = Field(default=None, alias="NORMALIZER_TOKEN")
    default_time_zone: str = Field(default=DEFAULT_TIME_ZONE, alias="DEFAULT_TIME_ZONE")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
