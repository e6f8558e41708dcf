import asyncio
import socket
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import pytest

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def fixture_payload():
    def load(name: str) -> bytes:
        return (TESTDATA / name).read_bytes()
    return load


@pytest.fixture
def mock_miner():
    """Factory for a one-shot mock device.

    The server reads the request, writes ``payload`` (zero-terminated unless
    ``terminate=False``) and closes. Requests received are appended to
    ``requests``.
    """

    @asynccontextmanager
    async def serve(payload: bytes, terminate: bool = True, requests: Optional[list] = None):
        async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
            data = await reader.read(65536)
            if requests is not None:
                requests.append(data)
            writer.write(payload + (b"\x00" if terminate else b""))
            await writer.drain()
            writer.close()

        server = await asyncio.start_server(handle, "127.0.0.1", 0)
        port = server.sockets[0].getsockname()[1]
        try:
            yield port
        finally:
            server.close()
            await server.wait_closed()

    return serve


@pytest.fixture
def silent_miner():
    """Mock device that accepts, never answers, and records when the client hangs up."""

    @asynccontextmanager
    async def serve():
        hung_up = asyncio.Event()

        async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
            while await reader.read(1024):
                pass
            hung_up.set()
            writer.close()

        server = await asyncio.start_server(handle, "127.0.0.1", 0)
        port = server.sockets[0].getsockname()[1]
        try:
            yield port, hung_up
        finally:
            server.close()
            await server.wait_closed()

    return serve


@pytest.fixture
def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]
