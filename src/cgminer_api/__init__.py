"""
cgminer-api — client for the JSON status/control API of cgminer/bmminer
based ASIC miner firmware.
"""

from cgminer_api.client import CGMiner, AsyncCGMiner, DEFAULT_PORT, DEFAULT_TIMEOUT
from cgminer_api.errors import (
    CGMinerError,
    ConnectError,
    TransportError,
    DecodeError,
    CardinalityError,
    APIError,
)
from cgminer_api.models.number import AmbiguousNumber
from cgminer_api.projection import project

__version__ = "0.1.0"
__all__ = [
    "CGMiner",
    "AsyncCGMiner",
    "DEFAULT_PORT",
    "DEFAULT_TIMEOUT",
    "CGMinerError",
    "ConnectError",
    "TransportError",
    "DecodeError",
    "CardinalityError",
    "APIError",
    "AmbiguousNumber",
    "project",
]
