"""
DEVS and DEVDETAILS payloads.
"""

from pydantic import Field

from cgminer_api.models.envelope import Envelope, Record


class Devs(Record):
    gpu: int = Field(0, alias="GPU")
    enabled: str = Field("", alias="Enabled")
    status: str = Field("", alias="Status")
    temperature: float = Field(0.0, alias="Temperature")
    temperature_junction: float = Field(0.0, alias="TemperatureJnct")
    temperature_memory: float = Field(0.0, alias="TemperatureMem")
    fan_speed: int = Field(0, alias="Fan Speed")
    fan_percent: int = Field(0, alias="Fan Percent")
    gpu_clock: int = Field(0, alias="GPU Clock")
    memory_clock: int = Field(0, alias="Memory Clock")
    gpu_voltage: float = Field(0.0, alias="GPU Voltage")
    power_consumption: float = Field(0.0, alias="GPU Power")
    powertune: int = Field(0, alias="Powertune")
    mhs_av: float = Field(0.0, alias="MHS av")
    mhs_5s: float = Field(0.0, alias="MHS 5s")
    mhs_30s: float = Field(0.0, alias="MHS 30s")
    accepted: int = Field(0, alias="Accepted")
    rejected: int = Field(0, alias="Rejected")
    hardware_errors: int = Field(0, alias="Hardware Errors")
    utility: float = Field(0.0, alias="Utility")
    intensity: str = Field("", alias="Intensity")
    last_share_pool: int = Field(0, alias="Last Share Pool")
    last_share_time: int = Field(0, alias="Last Share Time")
    total_mh: float = Field(0.0, alias="Total MH")
    diff1_work: int = Field(0, alias="Diff1 Work")
    difficulty_accepted: float = Field(0.0, alias="Difficulty Accepted")
    difficulty_rejected: float = Field(0.0, alias="Difficulty Rejected")
    last_share_difficulty: float = Field(0.0, alias="Last Share Difficulty")
    last_valid_work: int = Field(0, alias="Last Valid Work")
    device_hardware_percent: float = Field(0.0, alias="Device Hardware%")
    device_rejected_percent: float = Field(0.0, alias="Device Rejected%")
    device_elapsed: int = Field(0, alias="Device Elapsed")


class DeviceDetail(Record):
    id: int = Field(0, alias="ID")
    model: str = Field("", alias="Model")
    kernel: str = Field("", alias="Kernel")
    device_path: str = Field("", alias="Device Path")


class DevsResponse(Envelope):
    devs: list[Devs] = Field(default_factory=list, alias="DEVS")


class DeviceDetailResponse(Envelope):
    devdetails: list[DeviceDetail] = Field(default_factory=list, alias="DEVDETAILS")
