"""Временные окна для запросов контрибуций."""

from datetime import datetime, timedelta, timezone

CONTRIBUTIONS_WINDOW_DAYS = 366


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_graphql_datetime(value: datetime) -> str:
    """ISO-8601 в UTC с суффиксом Z, как ожидает тип DateTime GitHub."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def rolling_year_start(now: datetime) -> datetime:
    """1 января предыдущего календарного года, 00:00 UTC."""
    now = now.astimezone(timezone.utc)
    return datetime(now.year - 1, 1, 1, tzinfo=timezone.utc)


def contributions_window(now: datetime) -> tuple[datetime, datetime]:
    """Последние 365 дней плюс один день, чтобы сегодняшний день попал при сдвиге часовых поясов."""
    return now - timedelta(days=CONTRIBUTIONS_WINDOW_DAYS), now
