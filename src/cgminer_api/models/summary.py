"""
SUMMARY payload.

GPU builds report MHS rates, ASIC builds (S7 and later) report GHS rates;
``GHS 5s`` is quoted on some models and bare on others.
"""

from pydantic import Field

from cgminer_api.models.envelope import Envelope, Record
from cgminer_api.models.number import AmbiguousNumber, Number


class Summary(Record):
    elapsed: int = Field(0, alias="Elapsed")
    mhs_5s: float = Field(0.0, alias="MHS 5s")
    mhs_av: float = Field(0.0, alias="MHS av")
    ghs_5s: Number = Field(AmbiguousNumber(), alias="GHS 5s")
    ghs_av: float = Field(0.0, alias="GHS av")
    found_blocks: int = Field(0, alias="Found Blocks")
    getworks: int = Field(0, alias="Getworks")
    accepted: int = Field(0, alias="Accepted")
    rejected: int = Field(0, alias="Rejected")
    hardware_errors: int = Field(0, alias="Hardware Errors")
    utility: float = Field(0.0, alias="Utility")
    discarded: int = Field(0, alias="Discarded")
    stale: int = Field(0, alias="Stale")
    get_failures: int = Field(0, alias="Get Failures")
    local_work: int = Field(0, alias="Local Work")
    remote_failures: int = Field(0, alias="Remote Failures")
    network_blocks: int = Field(0, alias="Network Blocks")
    total_mh: float = Field(0.0, alias="Total MH")
    work_utility: float = Field(0.0, alias="Work Utility")
    difficulty_accepted: float = Field(0.0, alias="Difficulty Accepted")
    difficulty_rejected: float = Field(0.0, alias="Difficulty Rejected")
    difficulty_stale: float = Field(0.0, alias="Difficulty Stale")
    best_share: float = Field(0.0, alias="Best Share")
    device_hardware_percent: float = Field(0.0, alias="Device Hardware%")
    device_rejected_percent: float = Field(0.0, alias="Device Rejected%")
    pool_rejected_percent: float = Field(0.0, alias="Pool Rejected%")
    pool_stale_percent: float = Field(0.0, alias="Pool Stale%")
    last_getwork: int = Field(0, alias="Last getwork")


class SummaryResponse(Envelope):
    summary: list[Summary] = Field(default_factory=list, alias="SUMMARY")
