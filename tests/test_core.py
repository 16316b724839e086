"""Тесты для инфраструктурных модулей."""

import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest
from starlette.requests import Request

from app.core import http
from app.core.exceptions import unhandled_exception_handler
from app.domain.windows import contributions_window, rolling_year_start, to_graphql_datetime
from app.main import app


def test_rolling_year_start():
    """Тест начала окна: 1 января прошлого года."""
    now = datetime(2026, 10, 18, 15, 30, tzinfo=timezone.utc)

    assert rolling_year_start(now) == datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert to_graphql_datetime(rolling_year_start(now)) == "2025-01-01T00:00:00Z"


def test_contributions_window_covers_extra_day():
    """Тест окна календаря: 365 дней плюс один."""
    now = datetime(2024, 2, 29, 12, 0, tzinfo=timezone.utc)

    date_from, date_to = contributions_window(now)

    assert date_to == now
    assert date_to - date_from == timedelta(days=366)


def test_graphql_datetime_converts_to_utc():
    """Тест перевода времени в UTC."""
    moscow = timezone(timedelta(hours=3))

    assert to_graphql_datetime(datetime(2026, 1, 1, 2, 0, tzinfo=moscow)) == "2025-12-31T23:00:00Z"


@pytest.mark.asyncio
async def test_http_client_lifecycle():
    """Тест ленивой инициализации и закрытия HTTP клиента."""
    await http.close_http_client()

    client = await http.get_http_client()
    assert isinstance(client, httpx.AsyncClient)
    assert await http.get_http_client() is client

    await http.close_http_client()
    assert http.http_client is None
    assert client.is_closed


@pytest.mark.asyncio
async def test_unhandled_exception_is_generic():
    """Тест непредвиденной ошибки: 500 без деталей."""
    request = Request({"type": "http", "method": "GET", "path": "/stats", "headers": []})

    response = await unhandled_exception_handler(request, RuntimeError("token=abc"))

    assert response.status_code == 500
    assert json.loads(response.body) == {"error": "Internal server error"}


def test_app_debug_disabled():
    """Тест: приложение не включает режим отладки со страницей трассировки."""
    assert app.debug is False
