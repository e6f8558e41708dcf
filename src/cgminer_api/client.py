"""
CGMiner / AsyncCGMiner — main API clients.
"""

import asyncio
import logging
from typing import Any, Optional, TypeVar, Union

from cgminer_api.errors import CardinalityError, ConnectError, TransportError
from cgminer_api.models.command import Command
from cgminer_api.models.devices import DeviceDetail, DeviceDetailResponse, Devs, DevsResponse
from cgminer_api.models.envelope import Envelope
from cgminer_api.models.pools import Pool, PoolsResponse
from cgminer_api.models.stats import GenericStats, StatsResponse
from cgminer_api.models.summary import Summary, SummaryResponse
from cgminer_api.models.version import Version, VersionResponse
from cgminer_api.transport.connection import STREAM_LIMIT, TCPConnection
from cgminer_api.transport.json_transport import JSONTransport, Transport

logger = logging.getLogger(__name__)

DEFAULT_PORT = 4028
DEFAULT_TIMEOUT = 5.0

E = TypeVar("E", bound=Envelope)
R = TypeVar("R")


def _single(records: list[R], key: str, command: str) -> R:
    if not records:
        raise CardinalityError(f"{command!r}: no {key} in response")
    if len(records) > 1:
        raise CardinalityError(
            f"{command!r}: too many {key} entries in response", details={"count": len(records)}
        )
    return records[0]


def _pool_index(pool: Union[int, Pool]) -> str:
    return str(pool.pool if isinstance(pool, Pool) else int(pool))


class AsyncCGMiner:
    """Async miner API client (primary). Every call opens its own connection."""

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[Transport] = None,
        limit: int = STREAM_LIMIT,
    ):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.limit = limit
        self._transport = transport or JSONTransport()

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    async def call(
        self,
        command: str,
        parameter: str = "",
        response_model: Optional[type[E]] = None,
        timeout: Optional[float] = None,
    ) -> Optional[E]:
        """Run one command and return its decoded envelope.

        ``response_model`` is the envelope shape to decode into; pass None for
        commands whose reply only matters for its status.
        """
        cmd = Command(name=command, parameter=parameter)
        deadline = self.timeout if timeout is None else timeout
        conn = TCPConnection(self.host, self.port, deadline, limit=self.limit)
        try:
            await conn.connect()
        except ConnectError as e:
            raise ConnectError(f"{command!r}: {e}", details=e.details) from e.__cause__
        try:
            return await asyncio.wait_for(
                self._transport.execute(conn, cmd, response_model),
                timeout=deadline,
            )
        except asyncio.TimeoutError as e:
            raise TransportError(
                f"{command!r}: no response from {self.address} within {deadline}s"
            ) from e
        finally:
            await conn.close()

    async def version(self) -> Version:
        resp = await self.call("version", response_model=VersionResponse)
        return _single(resp.version, "VERSION", "version")  # type: ignore[union-attr]

    async def summary(self) -> Summary:
        resp = await self.call("summary", response_model=SummaryResponse)
        return _single(resp.summary, "SUMMARY", "summary")  # type: ignore[union-attr]

    async def stats(self) -> GenericStats:
        """Superset stats record; narrow it with ``.s9()``, ``.l3()`` etc."""
        resp = await self.call("stats", response_model=StatsResponse)
        return _single(resp.stats, "STATS", "stats")  # type: ignore[union-attr]

    async def devs(self) -> list[Devs]:
        resp = await self.call("devs", response_model=DevsResponse)
        return resp.devs  # type: ignore[union-attr]

    async def devdetails(self) -> list[DeviceDetail]:
        resp = await self.call("devdetails", response_model=DeviceDetailResponse)
        return resp.devdetails  # type: ignore[union-attr]

    async def pools(self) -> list[Pool]:
        resp = await self.call("pools", response_model=PoolsResponse)
        return resp.pools  # type: ignore[union-attr]

    async def add_pool(self, url: str, user: str, password: str) -> None:
        """Add a pool. Commas in the arguments are not escaped."""
        await self.call("addpool", f"{url},{user},{password}", response_model=Envelope)

    async def enable_pool(self, pool: Union[int, Pool]) -> None:
        await self.call("enablepool", _pool_index(pool))

    async def disable_pool(self, pool: Union[int, Pool]) -> None:
        await self.call("disablepool", _pool_index(pool))

    async def remove_pool(self, pool: Union[int, Pool]) -> None:
        await self.call("removepool", _pool_index(pool))

    async def switch_pool(self, pool: Union[int, Pool]) -> None:
        await self.call("switchpool", _pool_index(pool))

    async def restart(self) -> None:
        await self.call("restart")

    async def quit(self) -> None:
        await self.call("quit")


class CGMiner:
    """Sync wrapper around AsyncCGMiner. Each call runs on a fresh event loop,
    so one instance can be shared between threads."""

    def __init__(self, host: str, **kwargs: Any):
        self._async = AsyncCGMiner(host, **kwargs)

    @staticmethod
    def _run(coro: Any) -> Any:
        return asyncio.run(coro)

    @property
    def address(self) -> str:
        return self._async.address

    def call(
        self,
        command: str,
        parameter: str = "",
        response_model: Optional[type[E]] = None,
        timeout: Optional[float] = None,
    ) -> Optional[E]:
        return self._run(self._async.call(command, parameter, response_model, timeout))

    def version(self) -> Version:
        return self._run(self._async.version())

    def summary(self) -> Summary:
        return self._run(self._async.summary())

    def stats(self) -> GenericStats:
        return self._run(self._async.stats())

    def devs(self) -> list[Devs]:
        return self._run(self._async.devs())

    def devdetails(self) -> list[DeviceDetail]:
        return self._run(self._async.devdetails())

    def pools(self) -> list[Pool]:
        return self._run(self._async.pools())

    def add_pool(self, url: str, user: str, password: str) -> None:
        self._run(self._async.add_pool(url, user, password))

    def enable_pool(self, pool: Union[int, Pool]) -> None:
        self._run(self._async.enable_pool(pool))

    def disable_pool(self, pool: Union[int, Pool]) -> None:
        self._run(self._async.disable_pool(pool))

    def remove_pool(self, pool: Union[int, Pool]) -> None:
        self._run(self._async.remove_pool(pool))

    def switch_pool(self, pool: Union[int, Pool]) -> None:
        self._run(self._async.switch_pool(pool))

    def restart(self) -> None:
        self._run(self._async.restart())

    def quit(self) -> None:
        self._run(self._async.quit())
