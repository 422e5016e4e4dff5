# Invocation models
# Request/response shapes shared by the dispatcher and the HTTP API

from typing import Any

from pydantic import BaseModel, Field


class ToolSpecification(BaseModel):
    """Tool entry returned by the discovery endpoint."""

    name: str
    description: str
    inputSchema: dict[str, Any] = Field(  # noqa: N815
        default_factory=dict, description="Placeholder, schemas are not serialized"
    )


class InvocationRequest(BaseModel):
    """Request model for tool invocation."""

    tool: str = Field(..., description="Name of the tool to invoke")
    # Shape is checked by the dispatcher after the tool lookup
    parameters: Any = Field(None, description="Tool-specific parameters object")
    context: dict[str, Any] | None = Field(
        None, description="Optional caller context"
    )


class InvocationSpecification(BaseModel):
    """Description of the remote call a tool invocation performs."""

    api: str = "GitHub REST API"
    endpoint: str | None = None
    method: str | None = None
    parameters: dict[str, Any] | None = None
    description: str


class InvocationResponse(BaseModel):
    """Response model for tool invocation."""

    tool: str
    success: bool
    data: Any = None
    error: str | None = None
    invocation_specification: dict[str, Any] | None = None

    def to_wire(self) -> dict[str, Any]:
        """Serialize without the optional fields that were never set."""
        return self.model_dump(exclude_unset=True)
