# Services package
# Contains the GitHub client, tool registry and invocation dispatcher

from .dispatcher import ToolDispatcher
from .github_client import GitHubClient
from .registry import ToolDescriptor, ToolRegistry, build_default_registry

__all__ = [
    "GitHubClient",
    "ToolDescriptor",
    "ToolDispatcher",
    "ToolRegistry",
    "build_default_registry",
]
