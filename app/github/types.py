"""Схемы ответов GitHub GraphQL API.

Все вложенные объекты необязательны: GitHub может вернуть null или вовсе
опустить поле, нормализация подставляет значения по умолчанию.
"""

from pydantic import BaseModel, ConfigDict


class GraphQLModel(BaseModel):
    """Базовая схема ответа GitHub: лишние поля игнорируются."""

    model_config = ConfigDict(extra="ignore")


class TotalCount(GraphQLModel):
    totalCount: int | None = None


class PageInfo(GraphQLModel):
    hasNextPage: bool | None = None
    endCursor: str | None = None


class Language(GraphQLModel):
    name: str | None = None
    color: str | None = None


class LanguageEdge(GraphQLModel):
    size: int | None = None
    node: Language | None = None


class LanguageConnection(GraphQLModel):
    totalSize: int | None = None
    edges: list[LanguageEdge | None] | None = None


class BranchTarget(GraphQLModel):
    # history есть только у Commit, для остальных типов target пустой
    history: TotalCount | None = None


class DefaultBranchRef(GraphQLModel):
    target: BranchTarget | None = None


class RepositoryNode(GraphQLModel):
    """Репозиторий из страницы `repositories`."""

    id: str
    name: str
    nameWithOwner: str
    description: str | None = None
    url: str
    homepageUrl: str | None = None
    stargazers: TotalCount | None = None
    forkCount: int | None = None
    isPrivate: bool
    isArchived: bool
    isTemplate: bool
    primaryLanguage: Language | None = None
    updatedAt: str
    createdAt: str
    pushedAt: str | None = None
    languages: LanguageConnection | None = None
    defaultBranchRef: DefaultBranchRef | None = None


class RepositoryConnection(GraphQLModel):
    totalCount: int | None = None
    nodes: list[RepositoryNode | None] | None = None
    pageInfo: PageInfo | None = None


class CommitContributions(GraphQLModel):
    totalCommitContributions: int | None = None


class ReviewContributions(GraphQLModel):
    totalPullRequestReviewContributions: int | None = None


class StatsUser(GraphQLModel):
    """Пользователь из запроса статистики."""

    name: str | None = None
    login: str
    avatarUrl: str
    bio: str | None = None
    followers: TotalCount | None = None
    following: TotalCount | None = None
    commits: CommitContributions | None = None
    reviews: ReviewContributions | None = None
    repositoriesContributedTo: TotalCount | None = None
    pullRequests: TotalCount | None = None
    mergedPullRequests: TotalCount | None = None
    openIssues: TotalCount | None = None
    closedIssues: TotalCount | None = None
    repositories: RepositoryConnection | None = None


class StatsData(GraphQLModel):
    user: StatsUser | None = None


class ContributionDay(GraphQLModel):
    date: str
    contributionCount: int | None = None
    color: str | None = None


class ContributionWeek(GraphQLModel):
    contributionDays: list[ContributionDay] | None = None


class ContributionCalendar(GraphQLModel):
    totalContributions: int | None = None
    weeks: list[ContributionWeek] | None = None


class ContributionsCollection(GraphQLModel):
    totalCommitContributions: int | None = None
    totalIssueContributions: int | None = None
    totalPullRequestContributions: int | None = None
    totalPullRequestReviewContributions: int | None = None
    totalRepositoryContributions: int | None = None
    contributionCalendar: ContributionCalendar | None = None


class ContributionsUser(GraphQLModel):
    contributionsCollection: ContributionsCollection | None = None


class ContributionsData(GraphQLModel):
    user: ContributionsUser | None = None


class ReposUser(GraphQLModel):
    repositories: RepositoryConnection | None = None


class ReposData(GraphQLModel):
    user: ReposUser | None = None

