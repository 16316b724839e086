"""Обработка исключений."""

import logging
from typing import Any

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class GitHubError(Exception):
    """Базовое исключение транспорта GitHub GraphQL."""


class AuthenticationError(GitHubError):
    """Токен GitHub не передан."""

    def __init__(self):
        super().__init__("GitHub token is required")


class RateLimitError(GitHubError):
    """GitHub ответил 403: лимит запросов исчерпан."""

    def __init__(self, payload: Any = None):
        self.payload = payload if payload is not None else {}
        super().__init__(f"GitHub API rate limit exceeded: {self.payload}")


class UpstreamError(GitHubError):
    """GitHub ответил неуспешным HTTP статусом или запрос не дошел."""

    def __init__(self, status_code: int | None, status_text: str, transient: bool = False):
        self.status_code = status_code
        self.status_text = status_text
        self.transient = transient
        if status_code is None:
            super().__init__(f"GitHub API request failed: {status_text}")
        else:
            super().__init__(f"GitHub API error: {status_code} {status_text}")


class GraphQLError(GitHubError):
    """HTTP ответ успешный, но GraphQL вернул errors."""

    def __init__(self, messages: list[str]):
        self.messages = messages
        super().__init__(f"GraphQL errors: {', '.join(messages)}")


class NoDataError(GitHubError):
    """В успешном ответе нет поля data."""

    def __init__(self):
        super().__init__("No data returned from GitHub API")


class ServiceException(HTTPException):
    """Базовое исключение сервиса."""

    def __init__(self, message: str, http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(status_code=http_status, detail=message)


class NotFoundException(ServiceException):
    """Ресурс не найден в ответе GitHub."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)


class ConfigurationException(ServiceException):
    """Токен GitHub не настроен."""

    def __init__(self):
        super().__init__("GitHub token not configured", status.HTTP_500_INTERNAL_SERVER_ERROR)


class UpstreamFailureException(ServiceException):
    """Не удалось получить данные от GitHub."""

    def __init__(self, message: str):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def service_exception_handler(request: Request, exc: ServiceException) -> JSONResponse:
    """Обработчик исключений сервиса."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Обработчик HTTP исключений."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Обработчик ошибок валидации."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Invalid request parameters",
            "details": [
                {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
                for error in exc.errors()
            ],
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Обработчик непредвиденных исключений: детали только в лог."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )
