"""Конфигурация тестов."""

import json

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_github_client, get_login
from app.github.client import GitHubClient
from app.main import app


class FakeGitHub:
    """
    Подменный GitHub GraphQL для httpx.MockTransport.
    Отвечает по очереди, последний ответ повторяется.
    """

    def __init__(self):
        self.replies = []
        self.requests = []

    def reply(self, *replies):
        """Добавить ответы: (status, body) или исключение httpx."""
        self.replies.extend(replies)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        status_code, body = reply
        if isinstance(body, (dict, list)):
            return httpx.Response(status_code, json=body)
        return httpx.Response(status_code, text=body or "")

    @property
    def variables(self) -> list[dict]:
        return [json.loads(request.content)["variables"] for request in self.requests]


def ok(data):
    """Успешный ответ GraphQL."""
    return 200, {"data": data}


def repo_node(name: str, stars: int | None = 0, **overrides) -> dict:
    """Узел репозитория в форме ответа GitHub."""
    node = {
        "id": f"R_{name}",
        "name": name,
        "nameWithOwner": f"octocat/{name}",
        "description": f"{name} description",
        "url": f"https://github.com/octocat/{name}",
        "homepageUrl": None,
        "stargazers": {"totalCount": stars},
        "forkCount": 1,
        "isPrivate": False,
        "isArchived": False,
        "isTemplate": False,
        "primaryLanguage": {"name": "Python", "color": "#3572A5"},
        "updatedAt": "2026-01-02T10:00:00Z",
        "createdAt": "2024-05-01T10:00:00Z",
        "pushedAt": "2026-01-02T09:00:00Z",
        "languages": {
            "totalSize": 1500,
            "edges": [
                {"size": 1000, "node": {"name": "Python", "color": "#3572A5"}},
                {"size": 500, "node": {"name": "Shell", "color": "#89e051"}},
            ],
        },
        "defaultBranchRef": {"target": {"history": {"totalCount": 42}}},
    }
    node.update(overrides)
    return node


def repos_page(nodes: list[dict], has_next_page: bool = False, end_cursor: str | None = None):
    """Страница репозиториев в ответе на запрос userRepos."""
    return ok(
        {
            "user": {
                "repositories": {
                    "totalCount": len(nodes),
                    "nodes": nodes,
                    "pageInfo": {"hasNextPage": has_next_page, "endCursor": end_cursor},
                }
            }
        }
    )


def stats_user(**overrides) -> dict:
    """Пользователь в форме ответа на запрос userInfo."""
    user = {
        "name": "The Octocat",
        "login": "octocat",
        "avatarUrl": "https://avatars.githubusercontent.com/u/583231",
        "bio": None,
        "followers": {"totalCount": 120},
        "following": {"totalCount": 9},
        "commits": {"totalCommitContributions": 340},
        "reviews": {"totalPullRequestReviewContributions": 17},
        "repositoriesContributedTo": {"totalCount": 11},
        "pullRequests": {"totalCount": 55},
        "mergedPullRequests": {"totalCount": 48},
        "openIssues": {"totalCount": 4},
        "closedIssues": {"totalCount": 9},
        "repositories": {
            "totalCount": 3,
            "nodes": [repo_node("alpha", 3), repo_node("beta", 0), repo_node("gamma", 7)],
            "pageInfo": {"hasNextPage": False, "endCursor": None},
        },
    }
    user.update(overrides)
    return user


@pytest.fixture
def fake_github():
    """Подменный GitHub."""
    return FakeGitHub()


@pytest.fixture
async def http_client(fake_github):
    """HTTP клиент, отправляющий запросы в FakeGitHub."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_github.handler)) as client:
        yield client


@pytest.fixture
def github_client(http_client):
    """Клиент GitHub без задержек между повторами."""
    return GitHubClient(http_client, token="test-token", max_attempts=3, base_delay=0)


@pytest.fixture
async def api_client(github_client):
    """HTTP клиент приложения с подмененным GitHub."""
    app.dependency_overrides[get_github_client] = lambda: github_client
    app.dependency_overrides[get_login] = lambda: "octocat"

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
