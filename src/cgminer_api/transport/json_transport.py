"""
JSON transport — one request/response exchange over an open connection.

The firmware can also speak a plain-text format; only JSON is implemented.
"""

import asyncio
import logging
from typing import Optional, Protocol, TypeVar

from cgminer_api.errors import TransportError
from cgminer_api.models.command import Command
from cgminer_api.models.envelope import Envelope
from cgminer_api.transport.connection import TCPConnection
from cgminer_api.transport.envelope import check_status, decode_envelope, parse_envelope
from cgminer_api.transport.framing import needs_repair, read_frame, repair_payload

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Envelope)


class Transport(Protocol):
    async def execute(
        self,
        conn: TCPConnection,
        command: Command,
        response_model: Optional[type[E]],
    ) -> Optional[E]:
        ...


class JSONTransport:
    async def execute(
        self,
        conn: TCPConnection,
        command: Command,
        response_model: Optional[type[E]] = None,
    ) -> Optional[E]:
        """Send ``command`` and decode the reply into ``response_model``.

        With no ``response_model`` the reply is only checked for an error
        status; an empty or undecodable reply is accepted.
        """
        request = command.encode()
        logger.debug("-> %s %s", conn.address, request)
        try:
            conn.writer.write(request)
            await conn.writer.drain()
        except OSError as e:
            raise TransportError(f"{command.name!r}: write failed: {e}") from e

        try:
            payload = await read_frame(conn.reader)
        except (OSError, asyncio.LimitOverrunError) as e:
            raise TransportError(f"{command.name!r}: read failed: {e}") from e
        logger.debug("<- %s %d bytes", conn.address, len(payload))

        if needs_repair(command.name):
            payload = repair_payload(payload)

        if response_model is None:
            if not payload:
                return None
            envelope = parse_envelope(payload)
            if envelope is not None:
                check_status(envelope.status, command.name)
            return None

        out = decode_envelope(payload, response_model, command.name)
        check_status(out.status, command.name)
        return out
