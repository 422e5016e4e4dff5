# API package
# Contains the tool discovery and invocation endpoints

from . import tools

__all__ = ["tools"]
