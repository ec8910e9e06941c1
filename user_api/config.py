# user_api/config.py

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings, read from environment variables or a .env file."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "User Directory API"
    app_version: str = "1.0.0"

    host: str = "0.0.0.0"
    port: int = 3000

    log_level: str = "INFO"

    # Start with Alice and Bob in the store
    seed_users: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
