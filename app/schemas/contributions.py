"""Схемы для календаря контрибуций."""

from pydantic import BaseModel, Field


class ContributionDaySchema(BaseModel):
    """День календаря."""

    date: str
    contributionCount: int
    color: str | None = None


class ContributionWeekSchema(BaseModel):
    """Неделя календаря, дни в порядке GitHub."""

    contributionDays: list[ContributionDaySchema] = Field(default_factory=list)


class ContributionCalendarSchema(BaseModel):
    """Календарь контрибуций за период."""

    totalContributions: int
    weeks: list[ContributionWeekSchema] = Field(default_factory=list)
