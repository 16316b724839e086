"""API эндпоинты для календаря контрибуций."""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_github_client, get_login, public_cache
from app.domain.contributions.service import ContributionsService
from app.github.client import GitHubClient
from app.schemas.contributions import ContributionCalendarSchema

router = APIRouter(prefix="/contributions", tags=["Contributions"])


@router.get(
    "", response_model=ContributionCalendarSchema, dependencies=[Depends(public_cache)]
)
async def get_contributions(
    client: GitHubClient = Depends(get_github_client),
    login: str = Depends(get_login),
) -> ContributionCalendarSchema:
    """Получить календарь контрибуций за последний год."""
    return await ContributionsService(client, login).get_contributions()
