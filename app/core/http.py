"""Общий HTTP клиент для запросов к GitHub."""

from typing import Optional

import httpx

from app.core.config import settings

http_client: Optional[httpx.AsyncClient] = None


async def init_http_client():
    """Инициализация HTTP клиента (пул соединений)."""
    global http_client
    if http_client is not None:
        return

    http_client = httpx.AsyncClient(timeout=settings.GITHUB_TIMEOUT)


async def close_http_client():
    """Закрытие HTTP клиента."""
    global http_client
    if http_client is not None:
        try:
            await http_client.aclose()
        finally:
            http_client = None


async def get_http_client() -> httpx.AsyncClient:
    """
    Получить HTTP клиент.
    Если клиент еще не инициализирован (например, lifespan не запускался),
    создает его.
    """
    if http_client is None:
        await init_http_client()
    return http_client
