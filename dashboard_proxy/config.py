"""Application configuration via pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 3030
    log_level: str = "INFO"

    # Nextcloud (CalDAV): calendar feed, tasks and grocery collections
    nextcloud_username: str = ""
    nextcloud_password: str = ""
    calendar_url: str = ""
    tasks_url: str = ""
    grocery_url: str = ""

    # Weather key handed to the frontend as-is
    openweather_api_key: str = ""

    # Shopping list
    shopping_list_source: Literal["home_assistant", "alexa_api"] = "home_assistant"
    home_assistant_url: str = ""
    home_assistant_token: str = ""
    alexa_api_url: str = "http://localhost:3000"

    # Stocks
    stock_api_url: str = "https://query1.finance.yahoo.com/v8/finance/chart"


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
