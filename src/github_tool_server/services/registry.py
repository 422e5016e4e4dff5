"""Registry of the tools this server exposes.

Each tool is a ``ToolDescriptor``: a unique name, a description, a pydantic
input model used as its schema, and a coroutine handler that receives the
registry's bound ``GitHubClient``. New tools are added here; the dispatcher
does not need to change.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

import httpx
from pydantic import BaseModel

from ..models.tool import GetPopularRepositoriesInput
from .errors import ConfigurationError
from .github_client import (
    DEFAULT_API_URL,
    SEARCH_REPOSITORIES_ENDPOINT,
    GitHubClient,
    search_parameters,
)

logger = logging.getLogger(__name__)

ToolHandler = Callable[[GitHubClient, Any], Awaitable[Any]]
InvocationDescriber = Callable[[Any], Dict[str, Any]]


@dataclass(frozen=True)
class ToolDescriptor:
    """Registered metadata and handler for one tool."""

    name: str
    description: str
    input_model: Type[BaseModel]
    handler: ToolHandler
    describe: Optional[InvocationDescriber] = None


class ToolRegistry:
    """Ordered, name-unique collection of tools bound to one GitHub client"""

    def __init__(self, descriptors: Optional[List[ToolDescriptor]] = None):
        self._tools: Dict[str, ToolDescriptor] = {}
        self.client: Optional[GitHubClient] = None
        for descriptor in descriptors or []:
            self.register(descriptor)

    def register(self, descriptor: ToolDescriptor) -> None:
        """Add a tool

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if descriptor.name in self._tools:
            raise ValueError(f"Tool {descriptor.name} is already registered")
        self._tools[descriptor.name] = descriptor

    def initialize(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> GitHubClient:
        """Bind a new GitHub client; a later call replaces the earlier one."""
        if self.client is not None:
            logger.info("Replacing bound GitHub client")
        self.client = GitHubClient(token, base_url=base_url, transport=transport)
        return self.client

    def get(self, name: str) -> Optional[ToolDescriptor]:
        return self._tools.get(name)

    def list_tools(self) -> List[ToolDescriptor]:
        return list(self._tools.values())

    async def execute(self, descriptor: ToolDescriptor, params: BaseModel) -> Any:
        """Run a tool's handler with the bound client.

        Raises:
            ConfigurationError: If ``initialize`` has not been called
        """
        if self.client is None:
            raise ConfigurationError("Tool registry used before initialize() was called")
        return await descriptor.handler(self.client, params)

    async def aclose(self) -> None:
        if self.client is not None:
            await self.client.aclose()

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools


async def _get_popular_repositories(
    client: GitHubClient, params: GetPopularRepositoriesInput
) -> List[Dict[str, Any]]:
    repositories = await client.fetch_popular_repositories(params.count, params.language)
    return [repo.model_dump() for repo in repositories]


def _describe_popular_repositories(params: GetPopularRepositoriesInput) -> Dict[str, Any]:
    scope = f" in {params.language}" if params.language else ""
    return {
        "api": "GitHub REST API",
        "endpoint": SEARCH_REPOSITORIES_ENDPOINT,
        "method": "GET",
        "parameters": search_parameters(params.count, params.language),
        "description": (
            f"Calling GitHub API to search for {params.count} most starred repositories{scope}."
        ),
    }


GET_POPULAR_REPOSITORIES = ToolDescriptor(
    name="getPopularRepositories",
    description=(
        "Fetches a specified number of popular GitHub repositories, optionally "
        "filtered by language. Useful for finding widely used or trending projects."
    ),
    input_model=GetPopularRepositoriesInput,
    handler=_get_popular_repositories,
    describe=_describe_popular_repositories,
)


def build_default_registry() -> ToolRegistry:
    """Registry with the tools shipped by this server."""
    return ToolRegistry([GET_POPULAR_REPOSITORIES])
