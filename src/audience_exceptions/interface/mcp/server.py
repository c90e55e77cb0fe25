"""MCP server factory."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .tools import register_tools

SERVER_NAME = "audience-exceptions"


def create_server() -> FastMCP:
    """Build and return a FastMCP server with the exception tools registered."""
    server = FastMCP(SERVER_NAME)
    register_tools(server)
    return server


if __name__ == "__main__":
    create_server().run(transport="stdio")
