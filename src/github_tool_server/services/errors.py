"""Error taxonomy for the GitHub tool server.

Every request-time failure is one of these types. The HTTP status and the
machine-readable code are properties of the class; the instance carries the
message and, where known, the name of the tool being invoked so the API can
build the ``{tool, success, error}`` envelope from the exception alone.
"""

from typing import Any, Dict, List, Optional


class ToolServerError(Exception):
    """Base class for errors surfaced to tool server callers."""

    status_code = 500
    error_code = "TOOL_SERVER_ERROR"

    def __init__(self, message: str, tool: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.tool = tool
        self.details = details or {}


class ConfigurationError(ToolServerError):
    """Missing or invalid process configuration."""

    error_code = "CONFIG_ERROR"


class GitHubAPIError(ToolServerError):
    """A call to the GitHub REST API failed."""

    status_code = 502
    error_code = "GITHUB_API_ERROR"


class ToolNotFoundError(ToolServerError):
    """No tool is registered under the requested name."""

    status_code = 404
    error_code = "TOOL_NOT_FOUND"

    def __init__(self, tool: str):
        super().__init__(f'Tool "{tool}" not found.', tool)


class ParameterValidationError(ToolServerError):
    """Parameters rejected by a tool's input schema; one message per field."""

    status_code = 400
    error_code = "INVALID_PARAMETERS"

    def __init__(self, tool: str, messages: List[str]):
        self.messages = list(messages)
        super().__init__(
            f'Invalid parameters for tool "{tool}": {", ".join(self.messages)}',
            tool,
            {"messages": self.messages},
        )


class ToolExecutionError(ToolServerError):
    """A tool handler failed while executing."""

    error_code = "TOOL_EXEC_ERROR"

    def __init__(self, tool: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Internal server error: {message}", tool, details)
