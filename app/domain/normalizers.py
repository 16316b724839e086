"""Нормализация ответов GitHub GraphQL в стабильные схемы ответа.

Функции тотальные: отсутствующие счетчики становятся 0, отсутствующие
описательные поля становятся None, но всегда присутствуют в ответе.
"""

from app.github.types import (
    ContributionsCollection,
    DefaultBranchRef,
    LanguageConnection,
    RepositoryNode,
    StatsUser,
    TotalCount,
)
from app.schemas.activity import ActivitySummarySchema
from app.schemas.contributions import (
    ContributionCalendarSchema,
    ContributionDaySchema,
    ContributionWeekSchema,
)
from app.schemas.repository import (
    DefaultBranchRefSchema,
    LanguageEdgeSchema,
    LanguageSchema,
    LanguagesSchema,
    RepositorySchema,
)
from app.schemas.stats import UserStatisticsSchema

MAX_LANGUAGES = 10


def _count(value: TotalCount | None) -> int:
    return (value.totalCount if value else None) or 0


def total_stars(nodes: list[RepositoryNode | None] | None) -> int:
    """Сумма звезд по всем полученным репозиториям."""
    return sum(_count(node.stargazers) for node in nodes or [] if node is not None)


def combined_issues(open_issues: TotalCount | None, closed_issues: TotalCount | None) -> int:
    """Открытые и закрытые issues запрашиваются отдельно и складываются."""
    return _count(open_issues) + _count(closed_issues)


def commit_history_count(ref: DefaultBranchRef | None) -> int | None:
    """defaultBranchRef.target.history.totalCount или None, если звена нет."""
    if ref is None or ref.target is None or ref.target.history is None:
        return None
    return ref.target.history.totalCount


def normalize_languages(languages: LanguageConnection | None) -> LanguagesSchema:
    if languages is None:
        return LanguagesSchema(totalSize=0, edges=[])

    edges = [
        LanguageEdgeSchema(
            size=edge.size or 0,
            node=LanguageSchema(name=edge.node.name, color=edge.node.color),
        )
        for edge in languages.edges or []
        if edge is not None and edge.node is not None and edge.node.name
    ]
    # sorted стабилен, порядок GitHub при равных размерах сохраняется
    edges = sorted(edges, key=lambda edge: edge.size, reverse=True)[:MAX_LANGUAGES]
    return LanguagesSchema(totalSize=languages.totalSize or 0, edges=edges)


def normalize_repository(node: RepositoryNode) -> RepositorySchema:
    """Преобразовать узел репозитория GitHub в схему ответа."""
    history_count = commit_history_count(node.defaultBranchRef)
    primary = node.primaryLanguage

    return RepositorySchema(
        id=node.id,
        name=node.name,
        nameWithOwner=node.nameWithOwner,
        description=node.description,
        url=node.url,
        homepageUrl=node.homepageUrl,
        stargazerCount=_count(node.stargazers),
        forkCount=node.forkCount or 0,
        isPrivate=node.isPrivate,
        isArchived=node.isArchived,
        isTemplate=node.isTemplate,
        primaryLanguage=(
            LanguageSchema(name=primary.name, color=primary.color)
            if primary is not None and primary.name
            else None
        ),
        updatedAt=node.updatedAt,
        createdAt=node.createdAt,
        pushedAt=node.pushedAt,
        languages=normalize_languages(node.languages),
        defaultBranchRef=(
            DefaultBranchRefSchema.model_validate(
                {"target": {"history": {"totalCount": history_count}}}
            )
            if isinstance(history_count, int)
            else None
        ),
    )


def normalize_user_statistics(user: StatsUser) -> UserStatisticsSchema:
    """Преобразовать пользователя GitHub в сводную статистику."""
    repositories = user.repositories
    nodes = repositories.nodes if repositories else None

    return UserStatisticsSchema(
        name=user.name or user.login,
        login=user.login,
        avatarUrl=user.avatarUrl,
        totalRepos=(repositories.totalCount if repositories else None) or 0,
        totalStars=total_stars(nodes),
        totalCommits=(user.commits.totalCommitContributions if user.commits else None) or 0,
        totalPRs=_count(user.pullRequests),
        totalPRsMerged=_count(user.mergedPullRequests),
        totalReviews=(
            user.reviews.totalPullRequestReviewContributions if user.reviews else None
        )
        or 0,
        totalIssues=combined_issues(user.openIssues, user.closedIssues),
        contributedTo=_count(user.repositoriesContributedTo),
        followers=_count(user.followers),
        following=_count(user.following),
    )


def normalize_activity(user: StatsUser) -> ActivitySummarySchema:
    """Выбрать из статистики поля активности за год."""
    return ActivitySummarySchema(
        commits=(user.commits.totalCommitContributions if user.commits else None) or 0,
        pullRequests=_count(user.pullRequests),
        repositoriesContributedTo=_count(user.repositoriesContributedTo),
        issues=combined_issues(user.openIssues, user.closedIssues),
        reviews=(
            user.reviews.totalPullRequestReviewContributions if user.reviews else None
        )
        or 0,
    )


def normalize_contributions(collection: ContributionsCollection) -> ContributionCalendarSchema:
    """Календарь контрибуций; порядок недель и дней не меняется."""
    calendar = collection.contributionCalendar
    if calendar is None:
        return ContributionCalendarSchema(totalContributions=0, weeks=[])

    return ContributionCalendarSchema(
        totalContributions=calendar.totalContributions or 0,
        weeks=[
            ContributionWeekSchema(
                contributionDays=[
                    ContributionDaySchema(
                        date=day.date,
                        contributionCount=day.contributionCount or 0,
                        color=day.color,
                    )
                    for day in week.contributionDays or []
                ]
            )
            for week in calendar.weeks or []
        ],
    )
