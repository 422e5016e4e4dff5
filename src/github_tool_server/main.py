# FastAPI application entry point
# Builds the app, wires the tool registry and runs the listener

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel

from . import __version__
from .api import tools
from .config import Settings, get_settings
from .services.dispatcher import ToolDispatcher, format_validation_errors
from .services.errors import ConfigurationError
from .services.registry import ToolRegistry, build_default_registry

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def create_app(settings: Settings, registry: ToolRegistry | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Loaded settings; must carry a GitHub token unless an
            already initialized registry is supplied
        registry: Optional pre-built registry (tests bind a stub transport)

    Raises:
        ConfigurationError: If no registry is given and the token is missing
    """
    if registry is None:
        registry = build_default_registry()
        registry.initialize(settings.require_github_token(), base_url=settings.github_api_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifecycle"""
        logger.info(f"GitHub tool server ready with {len(registry)} tool(s)")
        yield
        logger.info("Shutting down GitHub tool server...")
        await registry.aclose()

    app = FastAPI(
        title="GitHub Tool Server",
        description="Discover and invoke GitHub-backed tools over HTTP",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.registry = registry
    app.state.dispatcher = ToolDispatcher(registry)

    app.include_router(tools.router)

    @app.exception_handler(RequestValidationError)
    async def invalid_request_body(request: Request, exc: RequestValidationError):
        # Malformed /invoke bodies still get the invocation error envelope
        if request.url.path != "/invoke":
            return await request_validation_exception_handler(request, exc)
        body = exc.body if isinstance(exc.body, dict) else {}
        tool_name = body.get("tool")
        messages = format_validation_errors(exc)
        return tools.error_response(
            tool_name if isinstance(tool_name, str) else "",
            400,
            f"Invalid invocation request: {', '.join(messages)}",
        )

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {"message": "Welcome to the GitHub Tool Server"}

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", message="Service is running")

    return app


def main() -> None:
    """CLI entry point: validate configuration, then serve."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        app = create_app(settings)
    except ConfigurationError as e:
        logger.error(e.message)
        sys.exit(1)

    base_url = f"http://localhost:{settings.port}"
    logger.info(f"GitHub Tool Server listening at {base_url}")
    logger.info(f"Tool discovery endpoint: {base_url}/tools")
    logger.info(f"Tool invocation endpoint: {base_url}/invoke")

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
