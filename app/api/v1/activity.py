"""API эндпоинты для активности."""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_github_client, get_login, public_cache
from app.domain.activity.service import ActivityService
from app.github.client import GitHubClient
from app.schemas.activity import ActivitySummarySchema

router = APIRouter(prefix="/activity", tags=["Activity"])


@router.get("", response_model=ActivitySummarySchema, dependencies=[Depends(public_cache)])
async def get_activity(
    client: GitHubClient = Depends(get_github_client),
    login: str = Depends(get_login),
) -> ActivitySummarySchema:
    """Получить активность за год."""
    return await ActivityService(client, login).get_activity()
