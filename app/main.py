"""Главный модуль FastAPI приложения."""

from contextlib import asynccontextmanager

import yaml
from fastapi import FastAPI
from pathlib import Path

from app.api.v1 import activity, contributions, health, repos, stats
from app.core.config import settings
from app.core.http import close_http_client, init_http_client
from app.core.logger import setup_logging
from app.core.exceptions import (
    http_exception_handler,
    service_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
    ServiceException,
)
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle events."""
    # Startup
    await init_http_client()
    yield
    # Shutdown
    await close_http_client()


app = FastAPI(
    title="GitHub Portfolio Stats Service",
    version="1.0.0",
    lifespan=lifespan,
)


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    openapi_path = Path(__file__).parent.parent / "openapi.yml"
    with open(openapi_path, "r", encoding="utf-8") as f:
        openapi_schema = yaml.safe_load(f)

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi

# Регистрируем обработчики исключений
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# Регистрируем роутеры
app.include_router(health.router)
app.include_router(stats.router)
app.include_router(activity.router)
app.include_router(contributions.router)
app.include_router(repos.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)
