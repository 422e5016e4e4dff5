"""
Test configuration and shared fixtures for the GitHub tool server tests.

The GitHub API is replaced by an ``httpx.MockTransport`` so every test runs
offline against a fixed set of search results.
"""

from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from github_tool_server.config import Settings
from github_tool_server.main import create_app
from github_tool_server.services.dispatcher import ToolDispatcher
from github_tool_server.services.registry import ToolRegistry, build_default_registry

TEST_TOKEN = "ghp_test_token"


def make_repo(name: str, stars: int, owner: Optional[str] = "octocat") -> Dict[str, Any]:
    """Raw search item shaped like GitHub's /search/repositories response"""
    return {
        "id": stars,
        "name": name,
        "full_name": f"{owner}/{name}" if owner else name,
        "owner": {"login": owner} if owner else None,
        "stargazers_count": stars,
        "forks_count": stars // 10,
        "description": f"The {name} project",
        "html_url": f"https://github.com/{owner}/{name}",
    }


class GitHubStub:
    """Stand-in for the GitHub search endpoint that records every request"""

    def __init__(self, items: List[Dict[str, Any]]):
        self.items = items
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.payload: Optional[Any] = None
        self.error: Optional[Exception] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.payload is not None:
            return httpx.Response(self.status_code, json=self.payload)
        per_page = int(request.url.params.get("per_page", 30))
        page = self.items[:per_page]
        return httpx.Response(
            self.status_code,
            json={"total_count": len(self.items), "incomplete_results": False, "items": page},
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_params(self) -> httpx.QueryParams:
        return self.requests[-1].url.params


@pytest.fixture
def sample_repos() -> List[Dict[str, Any]]:
    """Twelve repositories, most starred first"""
    return [make_repo(f"repo-{i}", 100_000 - i * 1_000) for i in range(12)]


@pytest.fixture
def github_stub(sample_repos) -> GitHubStub:
    return GitHubStub(sample_repos)


@pytest.fixture
def registry(github_stub) -> ToolRegistry:
    """Default registry bound to the stubbed GitHub API"""
    registry = build_default_registry()
    registry.initialize(TEST_TOKEN, transport=github_stub.transport)
    return registry


@pytest.fixture
def dispatcher(registry) -> ToolDispatcher:
    return ToolDispatcher(registry)


@pytest.fixture
def settings() -> Settings:
    return Settings(github_token=TEST_TOKEN)


@pytest.fixture
def client(settings, registry):
    """FastAPI test client wired to the stubbed registry"""
    return TestClient(create_app(settings, registry=registry))


@pytest.fixture
def repo_factory():
    """Build raw GitHub search items"""
    return make_repo
