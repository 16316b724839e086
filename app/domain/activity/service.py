"""Сервис для работы с активностью."""

from datetime import datetime

from app.domain.normalizers import normalize_activity
from app.domain.stats.service import StatsService
from app.schemas.activity import ActivitySummarySchema


class ActivityService(StatsService):
    """Тот же запрос, что и у статистики, но с меньшим набором полей."""

    failure_message = "Failed to fetch GitHub activity"

    async def get_activity(self, now: datetime | None = None) -> ActivitySummarySchema:
        """Получить активность пользователя за год."""
        return normalize_activity(await self._fetch_user(now))
