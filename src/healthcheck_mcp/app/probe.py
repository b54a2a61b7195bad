"""
HTTP liveness probe.

Issues a single GET to a target URL and measures the time until the
response headers arrive. Every failure raised by the HTTP stack is turned
into a ProbeDown value, so callers only ever receive an outcome and never
an exception. Cancellation is the one exception: it propagates and aborts
the request.
"""

import logging
import time
from typing import Optional

import anyio
import httpx

from healthcheck_mcp.app.models import ProbeDown, ProbeOutcome, ProbeUp

logger = logging.getLogger(__name__)

# Redirect hops followed before the last redirect response is reported as is.
MAX_REDIRECTS = 20


def _describe(exc: BaseException) -> str:
    # Some httpx errors carry an empty message.
    return str(exc) or type(exc).__name__


async def _close_quietly(response: httpx.Response) -> None:
    """Release a response whose body was never read.

    The status line and headers have already arrived at this point, so a
    failure while closing does not change the outcome of the probe.
    """
    try:
        await response.aclose()
    except httpx.HTTPError as exc:
        logger.debug(f"Ignoring error while closing response from {response.url}: {exc}")


async def probe(
    url: str,
    timeout_seconds: float,
    follow_redirects: bool = True,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ProbeOutcome:
    """
    Probe a URL once and report whether it answered.

    Any HTTP response counts as UP, whatever its status code: the probe
    measures reachability, not success.

    Args:
        url:              The URL to GET. Not validated beforehand; a malformed
                          URL simply produces a ProbeDown.
        timeout_seconds:  Overall deadline for the request, in seconds.
        follow_redirects: Whether to follow redirects before reporting. After
                          MAX_REDIRECTS hops the last 3xx response is reported.
        transport:        Optional httpx transport, used by tests to stub the
                          network.

    Returns:
        ProbeOutcome: ProbeUp with status code and latency, or ProbeDown with
                      the failure message.
    """
    started = time.perf_counter()
    try:
        # A fresh client per probe: invocations share no connections or state.
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_seconds),
            transport=transport,
        ) as client:
            with anyio.fail_after(timeout_seconds):
                request = client.build_request("GET", url)
                redirects = 0
                while True:
                    # Streaming returns as soon as the headers are in; the body is never read.
                    response = await client.send(request, stream=True)
                    elapsed = time.perf_counter() - started
                    status_code = response.status_code
                    next_request = response.next_request
                    await _close_quietly(response)

                    # Past the cap the last redirect response is the answer.
                    if not follow_redirects or next_request is None or redirects >= MAX_REDIRECTS:
                        break
                    request = next_request
                    redirects += 1

    except (httpx.TimeoutException, TimeoutError) as exc:
        logger.warning(f"Probe of {url} timed out after {timeout_seconds}s")
        return ProbeDown(
            error_message=(
                f"Request timed out after {timeout_seconds:g} seconds: {_describe(exc)}"
            )
        )

    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning(f"Probe of {url} failed: {type(exc).__name__}: {exc}")
        return ProbeDown(error_message=_describe(exc))

    except Exception as exc:
        # Not an httpx error, but still a failed probe rather than a tool fault.
        logger.exception(f"Probe of {url} raised an unexpected error")
        return ProbeDown(error_message=_describe(exc))

    latency_ms = int(elapsed * 1000)
    logger.info(f"Probe of {url} answered {status_code} in {latency_ms}ms")
    return ProbeUp(status_code=status_code, latency_ms=latency_ms)
