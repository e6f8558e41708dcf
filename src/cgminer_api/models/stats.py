"""
STATS payload.

``GenericStats`` is the superset of every field any Antminer model has been
seen to send under ``stats``; a response never fails to decode because a
model omits or adds a field. The ``Stats*`` classes are the field sets of
individual models; narrow a ``GenericStats`` with ``s9()``, ``l3()`` etc.
once the hardware model is known.
"""

from pydantic import Field

from cgminer_api.models.envelope import Envelope, Record
from cgminer_api.models.number import AmbiguousNumber, Number
from cgminer_api.projection import project

_ABSENT = AmbiguousNumber()


class GenericStats(Record):
    bmminer: str = Field("", alias="BMMiner")
    cgminer: str = Field("", alias="CGMiner")
    api: str = Field("", alias="API")
    miner: str = Field("", alias="Miner")
    compile_time: str = Field("", alias="CompileTime")
    type: str = Field("", alias="Type")
    miner_id: str = ""
    miner_version: str = ""
    miner_count: int = 0
    elapsed: int = Field(0, alias="Elapsed")
    wait: float = Field(0.0, alias="Wait")
    device_hardware_percent: float = Field(0.0, alias="Device Hardware%")
    stats: int = Field(0, alias="STATS")
    max: float = Field(0.0, alias="Max")
    no_matching_work: int = 0
    id: str = Field("", alias="ID")
    calls: int = Field(0, alias="Calls")
    min: float = Field(0.0, alias="Min")
    total_acn: int = 0
    total_rate: float = 0.0
    total_rateideal: float = 0.0
    total_freqavg: float = 0.0
    frequency: Number = _ABSENT
    freq_avg1: float = 0.0
    freq_avg2: float = 0.0
    freq_avg3: float = 0.0
    freq_avg4: float = 0.0
    freq_avg5: float = 0.0
    freq_avg6: float = 0.0
    freq_avg7: float = 0.0
    freq_avg8: float = 0.0
    freq_avg9: float = 0.0
    freq_avg10: float = 0.0
    freq_avg11: float = 0.0
    freq_avg12: float = 0.0
    freq_avg13: float = 0.0
    freq_avg14: float = 0.0
    freq_avg15: float = 0.0
    freq_avg16: float = 0.0
    fan_num: int = 0
    fan1: int = 0
    fan2: int = 0
    fan3: int = 0
    fan4: int = 0
    fan5: int = 0
    fan6: int = 0
    fan7: int = 0
    fan8: int = 0
    temp_max: int = 0
    temp_num: int = 0
    temp_avg: int = 0
    temp1: int = 0
    temp2: int = 0
    temp3: int = 0
    temp4: int = 0
    temp5: int = 0
    temp6: int = 0
    temp7: int = 0
    temp8: int = 0
    temp9: int = 0
    temp10: int = 0
    temp11: int = 0
    temp12: int = 0
    temp13: int = 0
    temp14: int = 0
    temp15: int = 0
    temp16: int = 0
    temp2_1: int = 0
    temp2_2: int = 0
    temp2_3: int = 0
    temp2_4: int = 0
    temp2_5: int = 0
    temp2_6: int = 0
    temp2_7: int = 0
    temp2_8: int = 0
    temp2_9: int = 0
    temp2_10: int = 0
    temp2_11: int = 0
    temp2_12: int = 0
    temp2_13: int = 0
    temp2_14: int = 0
    temp2_15: int = 0
    temp2_16: int = 0
    temp3_1: int = 0
    temp3_2: int = 0
    temp3_3: int = 0
    temp3_4: int = 0
    temp3_5: int = 0
    temp3_6: int = 0
    temp3_7: int = 0
    temp3_8: int = 0
    temp3_9: int = 0
    temp3_10: int = 0
    temp3_11: int = 0
    temp3_12: int = 0
    temp3_13: int = 0
    temp3_14: int = 0
    temp3_15: int = 0
    temp3_16: int = 0
    # L3+ names its third and fourth sensor rows differently
    temp31: int = 0
    temp32: int = 0
    temp33: int = 0
    temp34: int = 0
    temp4_1: int = 0
    temp4_2: int = 0
    temp4_3: int = 0
    temp4_4: int = 0
    ghs_5s: Number = Field(_ABSENT, alias="GHS 5s")
    ghs_av: float = Field(0.0, alias="GHS av")
    chain_hw1: int = 0
    chain_hw2: int = 0
    chain_hw3: int = 0
    chain_hw4: int = 0
    chain_hw5: int = 0
    chain_hw6: int = 0
    chain_hw7: int = 0
    chain_hw8: int = 0
    chain_hw9: int = 0
    chain_hw10: int = 0
    chain_hw11: int = 0
    chain_hw12: int = 0
    chain_hw13: int = 0
    chain_hw14: int = 0
    chain_hw15: int = 0
    chain_hw16: int = 0
    chain_acs1: str = ""
    chain_acs2: str = ""
    chain_acs3: str = ""
    chain_acs4: str = ""
    chain_acs5: str = ""
    chain_acs6: str = ""
    chain_acs7: str = ""
    chain_acs8: str = ""
    chain_acs9: str = ""
    chain_acs10: str = ""
    chain_acs11: str = ""
    chain_acs12: str = ""
    chain_acs13: str = ""
    chain_acs14: str = ""
    chain_acs15: str = ""
    chain_acs16: str = ""
    chain_acn1: int = 0
    chain_acn2: int = 0
    chain_acn3: int = 0
    chain_acn4: int = 0
    chain_acn5: int = 0
    chain_acn6: int = 0
    chain_acn7: int = 0
    chain_acn8: int = 0
    chain_acn9: int = 0
    chain_acn10: int = 0
    chain_acn11: int = 0
    chain_acn12: int = 0
    chain_acn13: int = 0
    chain_acn14: int = 0
    chain_acn15: int = 0
    chain_acn16: int = 0
    chain_rate1: Number = _ABSENT
    chain_rate2: Number = _ABSENT
    chain_rate3: Number = _ABSENT
    chain_rate4: Number = _ABSENT
    chain_rate5: Number = _ABSENT
    chain_rate6: Number = _ABSENT
    chain_rate7: Number = _ABSENT
    chain_rate8: Number = _ABSENT
    chain_rate9: Number = _ABSENT
    chain_rate10: Number = _ABSENT
    chain_rate11: Number = _ABSENT
    chain_rate12: Number = _ABSENT
    chain_rate13: Number = _ABSENT
    chain_rate14: Number = _ABSENT
    chain_rate15: Number = _ABSENT
    chain_rate16: Number = _ABSENT
    chain_rateideal1: float = 0.0
    chain_rateideal2: float = 0.0
    chain_rateideal3: float = 0.0
    chain_rateideal4: float = 0.0
    chain_rateideal5: float = 0.0
    chain_rateideal6: float = 0.0
    chain_rateideal7: float = 0.0
    chain_rateideal8: float = 0.0
    chain_rateideal9: float = 0.0
    chain_rateideal10: float = 0.0
    chain_rateideal11: float = 0.0
    chain_rateideal12: float = 0.0
    chain_rateideal13: float = 0.0
    chain_rateideal14: float = 0.0
    chain_rateideal15: float = 0.0
    chain_rateideal16: float = 0.0
    chain_opencore_1: Number = _ABSENT
    chain_opencore_2: Number = _ABSENT
    chain_opencore_3: Number = _ABSENT
    chain_opencore_4: Number = _ABSENT
    chain_opencore_5: Number = _ABSENT
    chain_opencore_6: Number = _ABSENT
    chain_opencore_7: Number = _ABSENT
    chain_opencore_8: Number = _ABSENT
    chain_opencore_9: Number = _ABSENT
    chain_opencore_10: Number = _ABSENT
    chain_opencore_11: Number = _ABSENT
    chain_opencore_12: Number = _ABSENT
    chain_opencore_13: Number = _ABSENT
    chain_opencore_14: Number = _ABSENT
    chain_opencore_15: Number = _ABSENT
    chain_opencore_16: Number = _ABSENT
    chain_offside_1: Number = _ABSENT
    chain_offside_2: Number = _ABSENT
    chain_offside_3: Number = _ABSENT
    chain_offside_4: Number = _ABSENT
    chain_offside_5: Number = _ABSENT
    chain_offside_6: Number = _ABSENT
    chain_offside_7: Number = _ABSENT
    chain_offside_8: Number = _ABSENT
    chain_offside_9: Number = _ABSENT
    chain_offside_10: Number = _ABSENT
    chain_offside_11: Number = _ABSENT
    chain_offside_12: Number = _ABSENT
    chain_offside_13: Number = _ABSENT
    chain_offside_14: Number = _ABSENT
    chain_offside_15: Number = _ABSENT
    chain_offside_16: Number = _ABSENT
    chain_xtime1: str = ""
    chain_xtime2: str = ""
    chain_xtime3: str = ""
    chain_xtime4: str = ""
    chain_xtime5: str = ""
    chain_xtime6: str = ""
    chain_xtime7: str = ""
    chain_xtime8: str = ""
    chain_xtime9: str = ""
    chain_xtime10: str = ""
    chain_xtime11: str = ""
    chain_xtime12: str = ""
    chain_xtime13: str = ""
    chain_xtime14: str = ""
    chain_xtime15: str = ""
    chain_xtime16: str = ""
    # S7
    baud: int = 0
    asic_count: int = 0
    timeout: int = 0
    voltage: Number = _ABSENT
    usb_pipe: Number = Field(_ABSENT, alias="USB Pipe")
    hwv1: int = 0
    hwv2: int = 0
    hwv3: int = 0
    hwv4: int = 0

    def s7(self) -> "StatsS7":
        return project(self, StatsS7)

    def s9(self) -> "StatsS9":
        return project(self, StatsS9)

    def t9(self) -> "StatsT9":
        return project(self, StatsT9)

    def d3(self) -> "StatsD3":
        return project(self, StatsD3)

    def l3(self) -> "StatsL3":
        return project(self, StatsL3)


class StatsResponse(Envelope):
    stats: list[GenericStats] = Field(default_factory=list, alias="STATS")


class _ModelStats(Record):
    """Fields every Antminer model sends."""
    miner: str = Field("", alias="Miner")
    compile_time: str = Field("", alias="CompileTime")
    type: str = Field("", alias="Type")
    stats: int = Field(0, alias="STATS")
    id: str = Field("", alias="ID")
    elapsed: int = Field(0, alias="Elapsed")
    calls: int = Field(0, alias="Calls")
    wait: float = Field(0.0, alias="Wait")
    max: float = Field(0.0, alias="Max")
    min: float = Field(0.0, alias="Min")
    ghs_5s: float = Field(0.0, alias="GHS 5s")
    ghs_av: float = Field(0.0, alias="GHS av")
    miner_count: int = 0
    frequency: float = 0.0
    fan_num: int = 0
    temp_num: int = 0
    temp_max: int = 0
    device_hardware_percent: float = Field(0.0, alias="Device Hardware%")
    no_matching_work: int = 0


class StatsS7(_ModelStats):
    cgminer: str = Field("", alias="CGMiner")
    baud: int = 0
    asic_count: int = 0
    timeout: int = 0
    voltage: float = 0.0
    usb_pipe: int = Field(0, alias="USB Pipe")
    fan1: int = 0
    fan3: int = 0
    temp1: int = 0
    temp2: int = 0
    temp3: int = 0
    temp_avg: int = 0
    hwv1: int = 0
    hwv2: int = 0
    hwv3: int = 0
    hwv4: int = 0
    chain_acn1: int = 0
    chain_acn2: int = 0
    chain_acn3: int = 0
    chain_acs1: str = ""
    chain_acs2: str = ""
    chain_acs3: str = ""


class StatsS9(_ModelStats):
    bmminer: str = Field("", alias="BMMiner")
    api: str = Field("", alias="API")
    miner_id: str = ""
    miner_version: str = ""
    total_acn: int = 0
    total_rate: float = 0.0
    total_rateideal: float = 0.0
    total_freqavg: float = 0.0
    freq_avg6: float = 0.0
    freq_avg7: float = 0.0
    freq_avg8: float = 0.0
    fan3: int = 0
    fan6: int = 0
    temp6: int = 0
    temp7: int = 0
    temp8: int = 0
    temp2_6: int = 0
    temp2_7: int = 0
    temp2_8: int = 0
    chain_hw6: int = 0
    chain_hw7: int = 0
    chain_hw8: int = 0
    chain_acs6: str = ""
    chain_acs7: str = ""
    chain_acs8: str = ""
    chain_acn6: int = 0
    chain_acn7: int = 0
    chain_acn8: int = 0
    chain_rate6: float = 0.0
    chain_rate7: float = 0.0
    chain_rate8: float = 0.0
    chain_rateideal6: float = 0.0
    chain_rateideal7: float = 0.0
    chain_rateideal8: float = 0.0
    chain_opencore_6: int = 0
    chain_opencore_7: int = 0
    chain_opencore_8: int = 0
    chain_offside_6: int = 0
    chain_offside_7: int = 0
    chain_offside_8: int = 0
    chain_xtime6: str = ""
    chain_xtime7: str = ""
    chain_xtime8: str = ""


class StatsT9(_ModelStats):
    bmminer: str = Field("", alias="BMMiner")
    miner_id: str = ""
    miner_version: str = ""
    total_acn: int = 0
    total_rate: float = 0.0
    total_rateideal: float = 0.0
    total_freqavg: float = 0.0
    freq_avg2: float = 0.0
    freq_avg3: float = 0.0
    freq_avg4: float = 0.0
    freq_avg5: float = 0.0
    freq_avg6: float = 0.0
    freq_avg7: float = 0.0
    freq_avg8: float = 0.0
    freq_avg9: float = 0.0
    freq_avg10: float = 0.0
    freq_avg11: float = 0.0
    freq_avg12: float = 0.0
    freq_avg13: float = 0.0
    freq_avg14: float = 0.0
    fan3: int = 0
    fan6: int = 0
    temp2: int = 0
    temp3: int = 0
    temp4: int = 0
    temp9: int = 0
    temp10: int = 0
    temp11: int = 0
    temp12: int = 0
    temp13: int = 0
    temp14: int = 0
    temp2_2: int = 0
    temp2_3: int = 0
    temp2_4: int = 0
    temp2_9: int = 0
    temp2_10: int = 0
    temp2_11: int = 0
    temp2_12: int = 0
    temp2_13: int = 0
    temp2_14: int = 0
    chain_hw2: int = 0
    chain_hw3: int = 0
    chain_hw4: int = 0
    chain_hw9: int = 0
    chain_hw10: int = 0
    chain_hw11: int = 0
    chain_hw12: int = 0
    chain_hw13: int = 0
    chain_hw14: int = 0
    chain_acs2: str = ""
    chain_acs3: str = ""
    chain_acs4: str = ""
    chain_acs9: str = ""
    chain_acs10: str = ""
    chain_acs11: str = ""
    chain_acs12: str = ""
    chain_acs13: str = ""
    chain_acs14: str = ""
    chain_acn2: int = 0
    chain_acn3: int = 0
    chain_acn4: int = 0
    chain_acn9: int = 0
    chain_acn10: int = 0
    chain_acn11: int = 0
    chain_acn12: int = 0
    chain_acn13: int = 0
    chain_acn14: int = 0
    chain_rate2: float = 0.0
    chain_rate3: float = 0.0
    chain_rate4: float = 0.0
    chain_rate9: float = 0.0
    chain_rate10: float = 0.0
    chain_rate11: float = 0.0
    chain_rate12: float = 0.0
    chain_rate13: float = 0.0
    chain_rate14: float = 0.0
    chain_rateideal2: float = 0.0
    chain_rateideal3: float = 0.0
    chain_rateideal4: float = 0.0
    chain_rateideal9: float = 0.0
    chain_rateideal10: float = 0.0
    chain_rateideal11: float = 0.0
    chain_rateideal12: float = 0.0
    chain_rateideal13: float = 0.0
    chain_rateideal14: float = 0.0
    chain_opencore_2: int = 0
    chain_opencore_3: int = 0
    chain_opencore_4: int = 0
    chain_opencore_9: int = 0
    chain_opencore_10: int = 0
    chain_opencore_11: int = 0
    chain_opencore_12: int = 0
    chain_opencore_13: int = 0
    chain_opencore_14: int = 0
    chain_offside_2: int = 0
    chain_offside_3: int = 0
    chain_offside_4: int = 0
    chain_offside_9: int = 0
    chain_offside_10: int = 0
    chain_offside_11: int = 0
    chain_offside_12: int = 0
    chain_offside_13: int = 0
    chain_offside_14: int = 0
    chain_xtime2: str = ""
    chain_xtime3: str = ""
    chain_xtime4: str = ""
    chain_xtime9: str = ""
    chain_xtime10: str = ""
    chain_xtime11: str = ""
    chain_xtime12: str = ""
    chain_xtime13: str = ""
    chain_xtime14: str = ""


class StatsD3(_ModelStats):
    cgminer: str = Field("", alias="CGMiner")
    fan1: int = 0
    fan2: int = 0
    temp1: int = 0
    temp2: int = 0
    temp3: int = 0
    temp4: int = 0
    temp2_1: int = 0
    temp2_2: int = 0
    temp2_3: int = 0
    chain_hw1: int = 0
    chain_hw2: int = 0
    chain_hw3: int = 0
    chain_acs1: str = ""
    chain_acs2: str = ""
    chain_acs3: str = ""
    chain_acn1: int = 0
    chain_acn2: int = 0
    chain_acn3: int = 0
    chain_rate1: float = 0.0
    chain_rate2: float = 0.0
    chain_rate3: float = 0.0


class StatsL3(_ModelStats):
    cgminer: str = Field("", alias="CGMiner")
    fan1: int = 0
    fan2: int = 0
    temp1: int = 0
    temp2: int = 0
    temp3: int = 0
    temp4: int = 0
    temp2_1: int = 0
    temp2_2: int = 0
    temp2_3: int = 0
    temp2_4: int = 0
    temp31: int = 0
    temp32: int = 0
    temp33: int = 0
    temp34: int = 0
    temp4_1: int = 0
    temp4_2: int = 0
    temp4_3: int = 0
    temp4_4: int = 0
    chain_hw1: int = 0
    chain_hw2: int = 0
    chain_hw3: int = 0
    chain_hw4: int = 0
    chain_acs1: str = ""
    chain_acs2: str = ""
    chain_acs3: str = ""
    chain_acs4: str = ""
    chain_acn1: int = 0
    chain_acn2: int = 0
    chain_acn3: int = 0
    chain_acn4: int = 0
    chain_rate1: float = 0.0
    chain_rate2: float = 0.0
    chain_rate3: float = 0.0
    chain_rate4: float = 0.0
