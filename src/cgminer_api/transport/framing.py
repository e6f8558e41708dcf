"""
Response framing and the ``stats`` payload repair.

Responses end with a zero byte, or simply with the connection closing.
"""

import asyncio
import logging

logger = logging.getLogger(__name__)

TERMINATOR = b"\x00"

# firmware writes two objects back to back ("}{") in its stats reply
REPAIR_COMMAND = "stats"


async def read_frame(reader: asyncio.StreamReader) -> bytes:
    """Read up to the terminator or EOF and strip trailing terminators.

    A clean EOF is not an error; whatever arrived before it is the frame.
    Other read errors propagate.
    """
    try:
        frame = await reader.readuntil(TERMINATOR)
    except asyncio.IncompleteReadError as e:
        frame = e.partial
    return frame.rstrip(TERMINATOR)


def needs_repair(command: str) -> bool:
    return command == REPAIR_COMMAND


def repair_payload(payload: bytes) -> bytes:
    """Merge two concatenated JSON objects by replacing the first ``}{``."""
    repaired = payload.replace(b"}{", b",", 1)
    if repaired != payload:
        logger.debug("Repaired concatenated JSON objects in payload")
    return repaired
