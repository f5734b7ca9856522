"""Fixtures for infrastructure tests.

Provides a mock email provider: a small FastAPI app served by uvicorn on a
random local port in a background thread. It records every request it
receives and answers with a configurable status code, optionally after a
delay or with a body trickled out byte by byte, so client timeouts are
exercised over a real socket.
"""

import asyncio
import socket
import threading
import time
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass

import pytest
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import StreamingResponse


@dataclass(frozen=True)
class RecordedRequest:
    """A request as seen by the mock provider."""

    method: str
    path: str
    headers: dict[str, str]
    body: bytes


class MockProvider:
    """Configurable stand-in for the email provider API."""

    def __init__(self) -> None:
        self.requests: list[RecordedRequest] = []
        self.status_code = 200
        self.delay_seconds = 0.0
        self.trickle_chunks = 0
        self.trickle_interval_seconds = 0.0
        self.app = FastAPI()
        self.app.add_api_route(
            "/{path:path}",
            self._handle,
            methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        )
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None
        self.uri = ""

    async def _handle(self, path: str, request: Request) -> Response:
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.url.path,
                headers=dict(request.headers),
                body=await request.body(),
            )
        )
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.trickle_chunks:
            return StreamingResponse(self._trickle(), status_code=self.status_code)
        return Response(status_code=self.status_code)

    async def _trickle(self) -> AsyncIterator[bytes]:
        for _ in range(self.trickle_chunks):
            await asyncio.sleep(self.trickle_interval_seconds)
            yield b"x"

    def respond_with(self, status_code: int, delay_seconds: float = 0.0) -> None:
        self.status_code = status_code
        self.delay_seconds = delay_seconds

    def trickle_body(self, chunks: int, interval_seconds: float) -> None:
        """Send headers at once, then one body byte every interval."""
        self.trickle_chunks = chunks
        self.trickle_interval_seconds = interval_seconds

    def start(self) -> None:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
        self.uri = f"http://127.0.0.1:{port}"

        config = uvicorn.Config(
            self.app,
            log_level="warning",
            lifespan="off",
            timeout_graceful_shutdown=1,
        )
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(
            target=self._server.run, kwargs={"sockets": [sock]}, daemon=True
        )
        self._thread.start()

        deadline = time.monotonic() + 5
        while not self._server.started:
            if time.monotonic() > deadline:
                raise RuntimeError("Mock provider did not start")
            time.sleep(0.01)

    def stop(self) -> None:
        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout=5)


@pytest.fixture
def mock_provider() -> Iterator[MockProvider]:
    """Start a mock provider that answers 200 to everything by default."""
    provider = MockProvider()
    provider.start()
    yield provider
    provider.stop()


@pytest.fixture
def unused_port() -> int:
    """Return a local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
