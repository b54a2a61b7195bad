"""Remote MCP server exposing an HTTP liveness probe tool."""

__version__ = "0.1.0"
