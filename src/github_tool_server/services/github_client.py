"""Thin async client for the GitHub REST API search endpoint."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..models.repository import RepositorySummary
from .errors import GitHubAPIError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
SEARCH_REPOSITORIES_ENDPOINT = "/search/repositories"
API_VERSION = "2022-11-28"
USER_AGENT = "github-tool-server"


def build_search_query(language: Optional[str] = None) -> str:
    """Build the popularity search query, optionally narrowed to a language."""
    query = "stars:>1"
    if language:
        query += f" language:{language}"
    return query


def search_parameters(count: int, language: Optional[str] = None) -> Dict[str, Any]:
    """Query parameters for one page of repositories sorted by stars."""
    return {
        "q": build_search_query(language),
        "sort": "stars",
        "order": "desc",
        "per_page": count,
    }


class GitHubClient:
    """Wraps the repository search call and normalizes its results"""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": USER_AGENT,
            },
            transport=transport,
        )

    async def fetch_popular_repositories(
        self, count: int = 10, language: Optional[str] = None
    ) -> List[RepositorySummary]:
        """Fetch the most starred repositories.

        Args:
            count: Number of repositories to return (one page, 1-100)
            language: Optional language filter

        Returns:
            Repository summaries in the order GitHub returned them

        Raises:
            GitHubAPIError: On transport errors, error responses or
                malformed payloads
        """
        try:
            response = await self._client.get(
                SEARCH_REPOSITORIES_ENDPOINT, params=search_parameters(count, language)
            )
            if response.is_error:
                raise GitHubAPIError(self._error_message(response))
            items = response.json()["items"]
            return [RepositorySummary.from_github(item) for item in items]
        except (GitHubAPIError, httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(f"Error fetching popular repositories: {e}")
            raise GitHubAPIError(
                f"Failed to fetch popular repositories: {self._describe(e)}",
                details={"count": count, "language": language},
            ) from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        # GitHub error bodies look like {"message": "...", "documentation_url": "..."}
        try:
            message = response.json().get("message")
        except (ValueError, AttributeError):
            message = None
        return message or f"{response.status_code} {response.reason_phrase}"

    @staticmethod
    def _describe(error: Exception) -> str:
        if isinstance(error, GitHubAPIError):
            return error.message
        return str(error) or type(error).__name__
