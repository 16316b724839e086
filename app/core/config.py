"""Конфигурация приложения."""

from pydantic_settings import BaseSettings
from pydantic import ConfigDict


class Settings(BaseSettings):
    """Настройки приложения."""

    GITHUB_TOKEN: str = ""
    GITHUB_USERNAME: str = "octocat"
    GITHUB_GRAPHQL_URL: str = "https://api.github.com/graphql"
    GITHUB_TIMEOUT: float = 30.0
    GITHUB_MAX_ATTEMPTS: int = 3
    GITHUB_RETRY_DELAY: float = 1.0
    SITE_URL: str | None = None
    CACHE_CONTROL: str = "public, s-maxage=3600, stale-while-revalidate=86400"
    LOG_LEVEL: str = "INFO"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8080
    DEBUG: bool = False

    model_config = ConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()
