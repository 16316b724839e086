"""Схемы для репозиториев."""

from pydantic import BaseModel, Field


class LanguageSchema(BaseModel):
    """Язык программирования."""

    name: str
    color: str | None = None


class LanguageEdgeSchema(BaseModel):
    """Объем кода на языке в байтах."""

    size: int
    node: LanguageSchema


class LanguagesSchema(BaseModel):
    """До 10 языков репозитория по убыванию объема."""

    totalSize: int = 0
    edges: list[LanguageEdgeSchema] = Field(default_factory=list, max_length=10)


class CommitHistorySchema(BaseModel):
    totalCount: int


class BranchTargetSchema(BaseModel):
    history: CommitHistorySchema


class DefaultBranchRefSchema(BaseModel):
    target: BranchTargetSchema


class RepositorySchema(BaseModel):
    """Схема репозитория."""

    id: str
    name: str
    nameWithOwner: str
    description: str | None
    url: str
    homepageUrl: str | None
    stargazerCount: int
    forkCount: int
    isPrivate: bool
    isArchived: bool
    isTemplate: bool
    primaryLanguage: LanguageSchema | None
    updatedAt: str
    createdAt: str
    pushedAt: str | None
    languages: LanguagesSchema
    defaultBranchRef: DefaultBranchRefSchema | None
