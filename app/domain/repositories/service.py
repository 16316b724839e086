"""Сервис для работы с репозиториями."""

import logging

from app.domain.base_service import BaseService
from app.domain.normalizers import normalize_repository
from app.github.queries import GRAPHQL_REPOS_QUERY
from app.github.types import RepositoryNode, ReposData
from app.schemas.repository import RepositorySchema

logger = logging.getLogger(__name__)

MAX_REPOSITORIES = 100
DEFAULT_LIMIT = 10


def parse_featured(featured: str | None) -> list[str]:
    """Разобрать список фрагментов имен через запятую, пустые отбрасываются."""
    if not featured:
        return []
    return [name.strip() for name in featured.split(",") if name.strip()]


def is_public(repo: RepositoryNode) -> bool:
    """Приватные, архивные и шаблонные репозитории клиенту не отдаются."""
    return not (repo.isPrivate or repo.isArchived or repo.isTemplate)


def is_featured(repo: RepositoryNode, featured: list[str]) -> bool:
    name = repo.name.lower()
    return any(fragment.lower() in name for fragment in featured)


def _stars(repo: RepositoryNode) -> int:
    return (repo.stargazers.totalCount if repo.stargazers else None) or 0


def select_repositories(
    repos: list[RepositoryNode], featured: list[str], limit: int
) -> list[RepositoryNode]:
    """
    Отфильтровать, упорядочить и обрезать список репозиториев.
    Избранные всегда идут раньше остальных, внутри групп порядок по звездам.
    """
    public_repos = [repo for repo in repos if is_public(repo)]

    if featured:
        groups = [
            [repo for repo in public_repos if is_featured(repo, featured)],
            [repo for repo in public_repos if not is_featured(repo, featured)],
        ]
    else:
        groups = [public_repos]

    ordered = []
    for group in groups:
        # sorted стабилен и с reverse=True
        ordered.extend(sorted(group, key=_stars, reverse=True))

    return ordered[:limit]


class RepositoryService(BaseService):
    """Сервис для работы с репозиториями."""

    failure_message = "Failed to fetch GitHub repositories"

    async def fetch_all(self) -> list[RepositoryNode]:
        """Постранично собрать репозитории владельца, не больше MAX_REPOSITORIES."""
        repos: list[RepositoryNode] = []
        has_next_page = True
        end_cursor = None

        while has_next_page and len(repos) < MAX_REPOSITORIES:
            data = await self._fetch(
                GRAPHQL_REPOS_QUERY, {"login": self.login, "after": end_cursor}, ReposData
            )
            connection = data.user.repositories if data.user else None
            if connection is None:
                break

            repos.extend(node for node in connection.nodes or [] if node is not None)

            page_info = connection.pageInfo
            has_next_page = bool(page_info and page_info.hasNextPage)
            end_cursor = page_info.endCursor if page_info else None
            if has_next_page and end_cursor is None:
                logger.warning("GitHub reported another page without a cursor")
                break

        if has_next_page and len(repos) >= MAX_REPOSITORIES:
            logger.info(f"Stopped repository pagination at {len(repos)} repositories")

        return repos[:MAX_REPOSITORIES]

    async def get_repositories(
        self, featured: list[str] | None = None, limit: int = DEFAULT_LIMIT
    ) -> list[RepositorySchema]:
        """Получить публичные репозитории: избранные первыми, затем по звездам."""
        repos = await self.fetch_all()
        selected = select_repositories(repos, featured or [], limit)
        return [normalize_repository(repo) for repo in selected]
