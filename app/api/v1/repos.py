"""API эндпоинты для репозиториев."""

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_github_client, get_login, public_cache
from app.domain.repositories.service import (
    DEFAULT_LIMIT,
    MAX_REPOSITORIES,
    RepositoryService,
    parse_featured,
)
from app.github.client import GitHubClient
from app.schemas.repository import RepositorySchema

router = APIRouter(prefix="/repos", tags=["Repositories"])


@router.get("", response_model=list[RepositorySchema], dependencies=[Depends(public_cache)])
async def get_repositories(
    featured: str | None = Query(None, description="Фрагменты имен через запятую"),
    limit: int = Query(DEFAULT_LIMIT, ge=0, le=MAX_REPOSITORIES),
    client: GitHubClient = Depends(get_github_client),
    login: str = Depends(get_login),
) -> list[RepositorySchema]:
    """Публичные репозитории: избранные первыми, затем по числу звезд."""
    return await RepositoryService(client, login).get_repositories(
        parse_featured(featured), limit
    )
