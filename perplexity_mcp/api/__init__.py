"""MCP protocol surface"""

from .server import create_server, run_stdio

__all__ = ["create_server", "run_stdio"]
