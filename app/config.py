from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # core
    ENV: str = "dev"
    API_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # storage
    # single JSON document holding every seller profile
    SELLERS_DATA_FILE: str = "data/sellers-persistent.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
