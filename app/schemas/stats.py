"""Схемы для статистики пользователя GitHub."""

from pydantic import BaseModel, Field


class UserStatisticsSchema(BaseModel):
    """Сводная статистика профиля GitHub."""

    name: str
    login: str
    avatarUrl: str
    totalRepos: int = Field(ge=0)
    totalStars: int = Field(ge=0)
    totalCommits: int = Field(ge=0)
    totalPRs: int = Field(ge=0)
    totalPRsMerged: int = Field(ge=0)
    totalReviews: int = Field(ge=0)
    totalIssues: int = Field(ge=0)
    contributedTo: int = Field(ge=0)
    followers: int = Field(ge=0)
    following: int = Field(ge=0)
