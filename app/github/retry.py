"""Таблица решений повторов для транспорта GitHub GraphQL."""

from enum import Enum


class RetryDecision(str, Enum):
    """Что делать с HTTP ответом."""

    SUCCESS = "success"
    RETRY = "retry"
    RATE_LIMITED = "rate_limited"
    FAIL = "fail"


def classify_status(status_code: int) -> RetryDecision:
    """Классифицировать HTTP статус ответа GitHub."""
    if 200 <= status_code < 300:
        return RetryDecision.SUCCESS
    if status_code == 403:
        return RetryDecision.RATE_LIMITED
    if status_code >= 500:
        return RetryDecision.RETRY
    return RetryDecision.FAIL


def retry_delay(base_delay: float, attempt: int) -> float:
    """Линейная задержка перед следующей попыткой: base * номер попытки."""
    return base_delay * attempt
