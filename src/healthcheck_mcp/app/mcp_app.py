"""
MCP application instance.

Creates and exports the single FastMCP application object used by the
service. Tool modules register themselves on this instance via the
@mcp.tool decorator.

Note: session handling, the initialize handshake and streaming are all
provided by FastMCP's HTTP transport; nothing here touches them.
"""

from fastmcp import FastMCP

SERVER_NAME = "healthcheck-remote-mcp-server"

# The shared FastMCP application instance.
mcp = FastMCP(
    SERVER_NAME,
    instructions=(
        "Probes HTTP endpoints for liveness. Call check_api_status with a URL "
        "to get its status code and latency, or the reason it is unreachable."
    ),
)
