"""Схемы для активности пользователя GitHub."""

from pydantic import BaseModel


class ActivitySummarySchema(BaseModel):
    """Активность за скользящий год."""

    commits: int
    pullRequests: int
    repositoriesContributedTo: int
    issues: int
    reviews: int
