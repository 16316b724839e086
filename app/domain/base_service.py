"""Базовый класс для сервисов."""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.exceptions import (
    AuthenticationError,
    ConfigurationException,
    GitHubError,
    UpstreamFailureException,
)
from app.github.client import GitHubClient

logger = logging.getLogger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class BaseService:
    """Базовый класс для всех сервисов."""

    failure_message = "Failed to fetch GitHub data"

    def __init__(self, client: GitHubClient, login: str):
        self.client = client
        self.login = login

    async def _fetch(
        self, query: str, variables: dict[str, Any], model: type[ResponseModel]
    ) -> ResponseModel:
        """
        Выполнить запрос и провалидировать `data` в схему ответа GitHub.
        Ошибки транспорта пишутся в лог целиком, наружу уходит только короткое сообщение.
        """
        try:
            data = await self.client.execute(query, variables)
            return model.model_validate(data)
        except AuthenticationError:
            logger.error("GitHub token not configured")
            raise ConfigurationException()
        except (GitHubError, ValidationError) as e:
            logger.exception(f"{self.failure_message} for {self.login}")
            raise UpstreamFailureException(self.failure_message) from e
