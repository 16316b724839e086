"""API эндпоинты для статистики."""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_github_client, get_login, public_cache
from app.domain.stats.service import StatsService
from app.github.client import GitHubClient
from app.schemas.stats import UserStatisticsSchema

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("", response_model=UserStatisticsSchema, dependencies=[Depends(public_cache)])
async def get_stats(
    client: GitHubClient = Depends(get_github_client),
    login: str = Depends(get_login),
) -> UserStatisticsSchema:
    """Получить статистику профиля GitHub."""
    return await StatsService(client, login).get_stats()
