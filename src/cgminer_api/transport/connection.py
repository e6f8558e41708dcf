"""
TCP connection to the miner API — one connection per call.

Connection: tcp://{host}:{port}, dial bounded by the call timeout.
Closed on every exit path, including task cancellation.
"""

import asyncio
import logging
from typing import Optional

from cgminer_api.errors import ConnectError

logger = logging.getLogger(__name__)

# stats replies from many-chain models exceed asyncio's 64 KiB default
STREAM_LIMIT = 4 * 1024 * 1024


class TCPConnection:
    def __init__(self, host: str, port: int, timeout: float, limit: int = STREAM_LIMIT):
        self._host = host
        self._port = port
        self._timeout = timeout
        self._limit = limit
        self._reader: Optional[asyncio.StreamReader] = None
        self._writer: Optional[asyncio.StreamWriter] = None

    @property
    def address(self) -> str:
        return f"{self._host}:{self._port}"

    @property
    def connected(self) -> bool:
        return self._writer is not None and not self._writer.is_closing()

    @property
    def reader(self) -> asyncio.StreamReader:
        if self._reader is None:
            raise RuntimeError("Connection not open")
        return self._reader

    @property
    def writer(self) -> asyncio.StreamWriter:
        if self._writer is None:
            raise RuntimeError("Connection not open")
        return self._writer

    async def connect(self) -> None:
        logger.debug("Dialing %s (timeout %.1fs)", self.address, self._timeout)
        try:
            self._reader, self._writer = await asyncio.wait_for(
                asyncio.open_connection(self._host, self._port, limit=self._limit),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise ConnectError(
                f"Timed out connecting to {self.address} after {self._timeout}s",
                details={"address": self.address},
            ) from e
        except OSError as e:
            raise ConnectError(
                f"Cannot connect to {self.address}: {e}",
                details={"address": self.address},
            ) from e

    async def close(self) -> None:
        writer, self._writer, self._reader = self._writer, None, None
        if writer is None:
            return
        writer.close()
        try:
            await writer.wait_closed()
        except OSError as e:
            # the peer may already have reset the socket
            logger.debug("Error while closing %s: %s", self.address, e)

    async def __aenter__(self) -> "TCPConnection":
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
