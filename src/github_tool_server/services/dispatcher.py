"""Dispatcher for tool discovery and invocation requests"""

import json
import logging
from typing import Any, Dict, List

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from ..models.invocation import (
    InvocationRequest,
    InvocationResponse,
    InvocationSpecification,
    ToolSpecification,
)
from .errors import ParameterValidationError, ToolExecutionError, ToolNotFoundError, ToolServerError
from .registry import ToolDescriptor, ToolRegistry

logger = logging.getLogger(__name__)


def format_validation_errors(error: ValidationError | RequestValidationError) -> List[str]:
    """Flatten pydantic errors into one message per offending field."""
    messages = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue["loc"])
        messages.append(f"{location}: {issue['msg']}" if location else issue["msg"])
    return messages


class ToolDispatcher:
    """Lists registered tools and runs validated invocations against them"""

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    def list_tools(self) -> List[ToolSpecification]:
        """Discovery view of every registered tool, in registration order."""
        return [
            ToolSpecification(name=tool.name, description=tool.description)
            for tool in self.registry.list_tools()
        ]

    async def invoke(self, request: InvocationRequest) -> InvocationResponse:
        """Look up, validate and execute one tool invocation

        Args:
            request: Invocation request with tool name and parameters

        Returns:
            Successful invocation response with data and invocation specification

        Raises:
            ToolNotFoundError: If no tool with that name is registered
            ParameterValidationError: If parameters fail the tool's schema
            ToolExecutionError: If the tool's handler fails
        """
        tool_name = request.tool
        if request.context:
            logger.debug(f"Invocation context for {tool_name}: {request.context}")

        descriptor = self.registry.get(tool_name)
        if descriptor is None:
            logger.warning(f"Tool not found: {tool_name}")
            raise ToolNotFoundError(tool_name)

        if request.parameters is None:
            logger.info(f"Missing parameters for {tool_name}")
            raise ParameterValidationError(tool_name, ["parameters: Field required"])
        if not isinstance(request.parameters, dict):
            logger.info(f"Non-object parameters for {tool_name}")
            raise ParameterValidationError(
                tool_name, ["parameters: Input should be a valid dictionary"]
            )

        try:
            params = descriptor.input_model.model_validate(request.parameters)
        except ValidationError as e:
            messages = format_validation_errors(e)
            logger.info(f"Rejected parameters for {tool_name}: {messages}")
            raise ParameterValidationError(tool_name, messages) from e

        specification = self.describe_invocation(descriptor, params)

        try:
            result = await self.registry.execute(descriptor, params)
        except ToolServerError as e:
            logger.error(f"Error executing tool {tool_name}: {e.message}")
            raise ToolExecutionError(tool_name, e.message, e.details) from e
        except Exception as e:
            logger.exception(f"Unexpected error executing tool {tool_name}")
            raise ToolExecutionError(tool_name, str(e) or type(e).__name__) from e

        logger.info(f"Tool {tool_name} executed successfully")
        return InvocationResponse(
            tool=tool_name,
            success=True,
            data=result,
            invocation_specification=specification,
        )

    @staticmethod
    def describe_invocation(descriptor: ToolDescriptor, params: BaseModel) -> Dict[str, Any]:
        """Informational summary of the remote call an invocation makes."""
        if descriptor.describe is not None:
            spec = InvocationSpecification(**descriptor.describe(params))
        else:
            spec = InvocationSpecification(
                api="GitHub REST API",
                description=(
                    f"Invoking tool '{descriptor.name}' with parameters: "
                    f"{json.dumps(params.model_dump(mode='json'))}"
                ),
            )
        return spec.model_dump(exclude_unset=True)
