"""Сервис для работы с календарем контрибуций."""

from datetime import datetime

from app.core.exceptions import NotFoundException
from app.domain.base_service import BaseService
from app.domain.normalizers import normalize_contributions
from app.domain.windows import contributions_window, to_graphql_datetime, utc_now
from app.github.queries import GRAPHQL_CONTRIBUTIONS_QUERY
from app.github.types import ContributionsData
from app.schemas.contributions import ContributionCalendarSchema


class ContributionsService(BaseService):
    """Сервис для работы с календарем контрибуций."""

    failure_message = "Failed to fetch GitHub contributions"

    async def get_contributions(self, now: datetime | None = None) -> ContributionCalendarSchema:
        """Получить календарь контрибуций за последний год."""
        date_from, date_to = contributions_window(now or utc_now())
        variables = {
            "login": self.login,
            "from": to_graphql_datetime(date_from),
            "to": to_graphql_datetime(date_to),
        }

        data = await self._fetch(GRAPHQL_CONTRIBUTIONS_QUERY, variables, ContributionsData)

        collection = data.user.contributionsCollection if data.user else None
        if collection is None:
            raise NotFoundException("Contributions data not found")

        return normalize_contributions(collection)
