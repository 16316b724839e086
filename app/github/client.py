"""Клиент GitHub GraphQL API с повторами запросов."""

import asyncio
import logging
from typing import Any, Optional

import httpx

from app.core.exceptions import (
    AuthenticationError,
    GraphQLError,
    NoDataError,
    RateLimitError,
    UpstreamError,
)
from app.github.retry import RetryDecision, classify_status, retry_delay

logger = logging.getLogger(__name__)


class GitHubClient:
    """Клиент GitHub GraphQL: авторизация, повторы с линейной задержкой, классификация ошибок."""

    GRAPHQL_ENDPOINT = "https://api.github.com/graphql"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        token: Optional[str],
        endpoint: str = GRAPHQL_ENDPOINT,
        max_attempts: int = 3,
        base_delay: float = 1.0,
    ):
        self.http_client = http_client
        self.token = token
        self.endpoint = endpoint
        self.max_attempts = max(1, max_attempts)
        self.base_delay = base_delay

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"bearer {self.token}",
            "Content-Type": "application/json",
        }

    async def execute(self, query: str, variables: Optional[dict[str, Any]] = None) -> dict:
        """Выполнить запрос и вернуть data.

        Без токена запрос не отправляется. Ответ 403, прочие не-2xx, ошибки
        GraphQL и ответ без data поднимаются типизированными исключениями.
        """
        if not self.token:
            raise AuthenticationError()

        response = await self._post(query, variables or {})

        try:
            payload = response.json()
        except ValueError as e:
            raise NoDataError() from e

        if not isinstance(payload, dict):
            raise NoDataError()

        errors = payload.get("errors")
        if errors:
            raise GraphQLError([self._error_message(error) for error in errors])

        data = payload.get("data")
        if data is None:
            raise NoDataError()

        return data

    async def _post(self, query: str, variables: dict[str, Any]) -> httpx.Response:
        """POST с повтором для 5xx и сетевых ошибок."""
        last_error: Optional[UpstreamError] = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                response = await self.http_client.post(
                    self.endpoint,
                    json={"query": query, "variables": variables},
                    headers=self.headers,
                )
            except httpx.TransportError as e:
                last_error = UpstreamError(None, str(e) or type(e).__name__, transient=True)
                last_error.__cause__ = e
            else:
                decision = classify_status(response.status_code)
                if decision is RetryDecision.SUCCESS:
                    return response
                if decision is RetryDecision.RATE_LIMITED:
                    raise RateLimitError(self._error_payload(response))
                if decision is RetryDecision.FAIL:
                    raise UpstreamError(response.status_code, response.reason_phrase)
                last_error = UpstreamError(
                    response.status_code, response.reason_phrase, transient=True
                )

            if attempt < self.max_attempts:
                delay = retry_delay(self.base_delay, attempt)
                logger.warning(
                    f"Attempt {attempt}/{self.max_attempts} to GitHub failed: "
                    f"{last_error}. Retrying in {delay:.1f}s..."
                )
                await asyncio.sleep(delay)

        logger.error(f"Max attempts ({self.max_attempts}) reached for GitHub GraphQL request")
        raise last_error

    @staticmethod
    def _error_payload(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return {}

    @staticmethod
    def _error_message(error: Any) -> str:
        if isinstance(error, dict):
            return str(error.get("message", ""))
        return str(error)
