"""
POOLS payload — one record per configured pool.
"""

from pydantic import Field

from cgminer_api.models.envelope import Envelope, Record
from cgminer_api.models.number import AmbiguousNumber, Number


class Pool(Record):
    pool: int = Field(0, alias="POOL")
    url: str = Field("", alias="URL")
    user: str = Field("", alias="User")
    status: str = Field("", alias="Status")
    priority: int = Field(0, alias="Priority")
    quota: int = Field(0, alias="Quota")
    long_poll: str = Field("", alias="Long Poll")
    getworks: int = Field(0, alias="Getworks")
    accepted: int = Field(0, alias="Accepted")
    rejected: int = Field(0, alias="Rejected")
    works: int = Field(0, alias="Works")
    discarded: int = Field(0, alias="Discarded")
    stale: int = Field(0, alias="Stale")
    get_failures: int = Field(0, alias="Get Failures")
    remote_failures: int = Field(0, alias="Remote Failures")
    diff1_shares: int = Field(0, alias="Diff1 Shares")
    proxy_type: str = Field("", alias="Proxy Type")
    proxy: str = Field("", alias="Proxy")
    difficulty_accepted: float = Field(0.0, alias="Difficulty Accepted")
    difficulty_rejected: float = Field(0.0, alias="Difficulty Rejected")
    difficulty_stale: float = Field(0.0, alias="Difficulty Stale")
    last_share_difficulty: float = Field(0.0, alias="Last Share Difficulty")
    last_share_time: str = Field("", alias="Last Share Time")
    has_stratum: bool = Field(False, alias="Has Stratum")
    stratum_active: bool = Field(False, alias="Stratum Active")
    stratum_url: str = Field("", alias="Stratum URL")
    has_gbt: bool = Field(False, alias="Has GBT")
    best_share: Number = Field(AmbiguousNumber(), alias="Best Share")
    pool_rejected_percent: float = Field(0.0, alias="Pool Rejected%")
    pool_stale_percent: float = Field(0.0, alias="Pool Stale%")


class PoolsResponse(Envelope):
    pools: list[Pool] = Field(default_factory=list, alias="POOLS")
