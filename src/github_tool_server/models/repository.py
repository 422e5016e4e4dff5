# Repository domain models
# Normalized view of GitHub search results

from typing import Any

from pydantic import BaseModel, Field


class RepositorySummary(BaseModel):
    """A repository as returned by the popular-repositories tool."""

    name: str = Field(..., description="Repository name")
    owner: str = Field("unknown", description="Owner login, 'unknown' when absent")
    stars: int = Field(..., description="Stargazer count")
    forks: int = Field(..., description="Fork count")
    description: str | None = Field(None, description="Repository description")
    url: str = Field(..., description="Repository page on github.com")

    @classmethod
    def from_github(cls, item: dict[str, Any]) -> "RepositorySummary":
        """Map a raw search result item onto the summary shape."""
        owner = item.get("owner") or {}
        return cls(
            name=item["name"],
            owner=owner.get("login") or "unknown",
            stars=item["stargazers_count"],
            forks=item["forks_count"],
            description=item.get("description"),
            url=item["html_url"],
        )
