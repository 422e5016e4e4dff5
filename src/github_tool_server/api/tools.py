# Tool API - discovery and invocation endpoints
# Thin HTTP binding over the ToolDispatcher

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from ..models.invocation import InvocationRequest, InvocationResponse, ToolSpecification
from ..services.dispatcher import ToolDispatcher
from ..services.errors import ToolServerError

router = APIRouter(tags=["tools"])


def get_dispatcher(request: Request) -> ToolDispatcher:
    """Get the dispatcher from app state

    Raises:
        HTTPException: If the dispatcher was not initialized
    """
    dispatcher = getattr(request.app.state, "dispatcher", None)
    if dispatcher is None:
        raise HTTPException(status_code=500, detail="Tool dispatcher not initialized")
    return dispatcher


def error_response(tool: str, status_code: int, message: str) -> JSONResponse:
    """Uniform error envelope shared by every failing invocation."""
    body = InvocationResponse(tool=tool, success=False, error=message)
    return JSONResponse(status_code=status_code, content=body.to_wire())


@router.get("/tools", response_model=list[ToolSpecification], operation_id="list_tools")
async def list_tools(
    dispatcher: ToolDispatcher = Depends(get_dispatcher),  # noqa: B008
) -> list[ToolSpecification]:
    """List every registered tool with its description."""
    return dispatcher.list_tools()


@router.post("/invoke", operation_id="invoke_tool")
async def invoke_tool(
    request: InvocationRequest,
    dispatcher: ToolDispatcher = Depends(get_dispatcher),  # noqa: B008
) -> JSONResponse:
    """Invoke a registered tool by name with validated parameters.

    Responds 404 for unknown tools, 400 for invalid parameters and 500 when
    the tool itself fails.
    """
    try:
        response = await dispatcher.invoke(request)
    except ToolServerError as e:
        return error_response(e.tool or request.tool, e.status_code, e.message)
    return JSONResponse(content=response.to_wire())
