# GitHub tool server
# HTTP tool discovery and invocation backed by the GitHub REST API

__version__ = "0.1.0"

from .main import create_app, main  # noqa: E402

__all__ = ["create_app", "main", "__version__"]
