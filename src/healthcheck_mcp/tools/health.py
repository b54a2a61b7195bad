"""
Health-check tool for the MCP server.

Exposes check_api_status, which probes an HTTP endpoint and returns its
status as a JSON string. Monitoring agents call it to find out whether an
API is reachable and how quickly it answers.
"""

from healthcheck_mcp.app.config import settings
from healthcheck_mcp.app.mcp_app import mcp
from healthcheck_mcp.app.models import ProbeResult
from healthcheck_mcp.app.probe import probe


@mcp.tool
async def check_api_status(url: str) -> str:
    """
    Checks the status of an API endpoint by performing an HTTP probe.

    Any HTTP response, including 4xx and 5xx, reports the endpoint as UP.
    Connection failures, DNS errors, malformed URLs and timeouts report it
    as DOWN. This tool never fails; errors are part of the result.

    Args:
        url: The full URL to probe, e.g. https://api.example.com/health.

    Returns:
        str: A JSON object with status ("UP" or "DOWN"), http_status_code,
             latency_ms, timestamp (ISO-8601 UTC) and error_details.
    """
    outcome = await probe(
        url,
        timeout_seconds=settings.PROBE_TIMEOUT_SECONDS,
        follow_redirects=settings.PROBE_FOLLOW_REDIRECTS,
    )
    # Timestamp is taken once the attempt has finished, whatever its outcome.
    return ProbeResult.from_outcome(outcome).to_json()
