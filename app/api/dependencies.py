"""Зависимости для API."""

import httpx
from fastapi import Depends, Response

from app.core.config import settings
from app.core.http import get_http_client
from app.github.client import GitHubClient


async def get_github_client(
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> GitHubClient:
    """Получить клиент GitHub GraphQL с токеном из настроек."""
    return GitHubClient(
        http_client,
        token=settings.GITHUB_TOKEN,
        endpoint=settings.GITHUB_GRAPHQL_URL,
        max_attempts=settings.GITHUB_MAX_ATTEMPTS,
        base_delay=settings.GITHUB_RETRY_DELAY,
    )


def get_login() -> str:
    """Логин GitHub, данные которого отдает сервис."""
    return settings.GITHUB_USERNAME


def public_cache(response: Response):
    """Заголовок кеширования для успешных ответов."""
    response.headers["Cache-Control"] = settings.CACHE_CONTROL
