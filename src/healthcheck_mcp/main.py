"""
Entry point for the healthcheck MCP server.

Starts a Uvicorn HTTP server that serves the FastMCP application over the
streamable-HTTP transport. Before the app is ready, it imports all tool
modules so they register their MCP tools.
"""

import logging

import uvicorn
from starlette.applications import Starlette

from healthcheck_mcp.app.config import settings
from healthcheck_mcp.app.mcp_app import mcp

# Import tool modules so their @mcp.tool decorators run at startup.
# The "noqa: F401" comment tells linters the import is intentional
# even though the module is not used directly in this file.
import healthcheck_mcp.tools.health  # noqa: F401

logger = logging.getLogger(__name__)


def create_app(path: str = settings.MCP_PATH) -> Starlette:
    """
    Build the ASGI application that FastMCP generates for HTTP transport.

    Args:
        path: URL path the MCP endpoint is mounted on.

    Returns:
        Starlette: The ASGI app, with the session manager wired into its lifespan.
    """
    return mcp.http_app(path=path, transport="http")


def main() -> None:
    """
    Configure logging, build the ASGI application and start the Uvicorn
    server on the configured host and port.
    """
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    logger.info(
        f"Serving {mcp.name} on http://{settings.HOST}:{settings.PORT}{settings.MCP_PATH}"
    )

    uvicorn.run(create_app(), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
