from cgminer_api.models.command import Command
from cgminer_api.models.devices import DeviceDetail, DeviceDetailResponse, Devs, DevsResponse
from cgminer_api.models.envelope import Envelope, Record, Severity, StatusEntry
from cgminer_api.models.number import AmbiguousNumber, Number
from cgminer_api.models.pools import Pool, PoolsResponse
from cgminer_api.models.stats import (
    GenericStats,
    StatsD3,
    StatsL3,
    StatsResponse,
    StatsS7,
    StatsS9,
    StatsT9,
)
from cgminer_api.models.summary import Summary, SummaryResponse
from cgminer_api.models.version import Version, VersionResponse

__all__ = [
    "AmbiguousNumber",
    "Command",
    "DeviceDetail",
    "DeviceDetailResponse",
    "Devs",
    "DevsResponse",
    "Envelope",
    "GenericStats",
    "Number",
    "Pool",
    "PoolsResponse",
    "Record",
    "Severity",
    "StatsD3",
    "StatsL3",
    "StatsResponse",
    "StatsS7",
    "StatsS9",
    "StatsT9",
    "StatusEntry",
    "Summary",
    "SummaryResponse",
    "Version",
    "VersionResponse",
]
