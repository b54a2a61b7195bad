"""
Shared fixtures.

Stub target servers and the MCP server itself run under uvicorn in a
background thread so probes go over a real socket.
"""

import asyncio
import socket
import threading
import time
from contextlib import contextmanager

import pytest
import uvicorn
from starlette.applications import Starlette
from starlette.responses import PlainTextResponse, RedirectResponse
from starlette.routing import Route

from healthcheck_mcp.main import create_app

SLOW_DELAY_SECONDS = 0.05

# Nothing listens on port 1; connecting there is refused.
REFUSED_URL = "http://127.0.0.1:1"


class _ThreadedServer(uvicorn.Server):
    def install_signal_handlers(self) -> None:
        # Signal handlers can only be installed from the main thread.
        pass


@contextmanager
def serve_in_thread(app):
    """Run an ASGI app on an ephemeral localhost port and yield its base URL."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]

    config = uvicorn.Config(app, log_level="warning", timeout_graceful_shutdown=1)
    server = _ThreadedServer(config)
    thread = threading.Thread(target=server.run, kwargs={"sockets": [sock]}, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if not thread.is_alive() or time.monotonic() > deadline:
            raise RuntimeError("stub server failed to start")
        time.sleep(0.01)

    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        server.should_exit = True
        thread.join(timeout=5)
        sock.close()


async def _ok(request):
    return PlainTextResponse("ok")


async def _missing(request):
    return PlainTextResponse("not found", status_code=404)


async def _broken(request):
    return PlainTextResponse("boom", status_code=500)


async def _slow(request):
    await asyncio.sleep(SLOW_DELAY_SECONDS)
    return PlainTextResponse("slow")


async def _hang(request):
    await asyncio.sleep(2)
    return PlainTextResponse("late")


async def _redirect(request):
    return RedirectResponse("/ok", status_code=307)


target_app = Starlette(
    routes=[
        Route("/ok", _ok),
        Route("/missing", _missing),
        Route("/broken", _broken),
        Route("/slow", _slow),
        Route("/hang", _hang),
        Route("/redirect", _redirect),
    ]
)


@pytest.fixture(scope="session")
def target_url():
    """Base URL of the stub server that probes are aimed at."""
    with serve_in_thread(target_app) as base_url:
        yield base_url


@pytest.fixture(scope="session")
def mcp_url():
    """URL of the MCP endpoint served over streamable HTTP."""
    with serve_in_thread(create_app(path="/mcp")) as base_url:
        yield f"{base_url}/mcp"
