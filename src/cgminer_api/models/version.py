"""
VERSION payload — miner software versions and hardware model.
"""

from pydantic import Field

from cgminer_api.models.envelope import Envelope, Record


class Version(Record):
    bmminer: str = Field("", alias="BMMiner")
    cgminer: str = Field("", alias="CGMiner")
    api: str = Field("", alias="API")
    miner: str = Field("", alias="Miner")
    compile_time: str = Field("", alias="CompileTime")
    type: str = Field("", alias="Type")


class VersionResponse(Envelope):
    version: list[Version] = Field(default_factory=list, alias="VERSION")
