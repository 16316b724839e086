"""Сервис для работы со статистикой."""

from datetime import datetime

from app.core.exceptions import NotFoundException
from app.domain.base_service import BaseService
from app.domain.normalizers import normalize_user_statistics
from app.domain.windows import rolling_year_start, to_graphql_datetime, utc_now
from app.github.queries import GRAPHQL_STATS_QUERY
from app.github.types import StatsData, StatsUser
from app.schemas.stats import UserStatisticsSchema


class StatsService(BaseService):
    """Сервис для работы со статистикой."""

    failure_message = "Failed to fetch GitHub stats"

    async def _fetch_user(self, now: datetime | None = None) -> StatsUser:
        """Запросить пользователя с контрибуциями с 1 января прошлого года."""
        variables = {
            "login": self.login,
            "after": None,
            "includeMergedPullRequests": True,
            "startTime": to_graphql_datetime(rolling_year_start(now or utc_now())),
        }
        data = await self._fetch(GRAPHQL_STATS_QUERY, variables, StatsData)
        if data.user is None:
            raise NotFoundException("User not found")
        return data.user

    async def get_stats(self, now: datetime | None = None) -> UserStatisticsSchema:
        """Получить сводную статистику пользователя."""
        return normalize_user_statistics(await self._fetch_user(now))
