"""MCP entrypoint.

Usage:
    python -m audience_exceptions.interface.mcp_server
    # or via the script entrypoint:
    audience-exceptions-mcp
"""

from __future__ import annotations

from ..config import get_settings
from ..observability import configure_logging
from .mcp.server import create_server


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    server = create_server()
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
