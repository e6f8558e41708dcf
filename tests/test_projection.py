import pytest

from cgminer_api.models.number import AmbiguousNumber
from cgminer_api.models.stats import GenericStats, StatsD3, StatsL3, StatsS7, StatsS9, StatsT9
from cgminer_api.projection import field_plan, project


def make_stats(**values) -> GenericStats:
    return GenericStats.model_validate(values)


def test_copies_matching_fields():
    stats = make_stats(Type="Antminer S9", miner_count=3, temp6=56, chain_acs6=" oooo")
    s9 = stats.s9()
    assert isinstance(s9, StatsS9)
    assert s9.type == "Antminer S9"
    assert s9.miner_count == 3
    assert s9.temp6 == 56
    assert s9.chain_acs6 == " oooo"


def test_ambiguous_numbers_become_concrete():
    stats = make_stats(**{"GHS 5s": "13630.55", "frequency": "637", "chain_rate6": "4536.24", "chain_opencore_8": "1"})
    s9 = stats.s9()
    assert s9.ghs_5s == pytest.approx(13630.55)
    assert s9.frequency == 637.0
    assert s9.chain_rate6 == pytest.approx(4536.24)
    assert s9.chain_opencore_8 == 1
    assert isinstance(s9.chain_opencore_8, int)


def test_missing_source_values_are_zero():
    s9 = make_stats().s9()
    assert s9.ghs_5s == 0.0
    assert s9.chain_rate6 == 0.0
    assert s9.bmminer == ""


def test_fields_outside_target_are_dropped():
    l3 = make_stats(temp6=56, temp31=12, fan1=5250).l3()
    assert l3.temp31 == 12
    assert l3.fan1 == 5250
    assert not hasattr(l3, "temp6")


def test_type_mismatch_takes_zero_value():
    from cgminer_api.models.envelope import Record

    class Source(Record):
        a: str = "text"
        b: float = 1.5
        c: int = 7

    class Target(Record):
        a: int = 0
        b: int = 0
        c: float = 0.0

    out = project(Source(), Target)
    assert out.a == 0
    assert out.b == 0
    assert out.c == 7.0


def test_projection_is_deterministic():
    stats = make_stats(**{"GHS 5s": 10.5, "temp1": 60, "chain_rate1": "5712.75"})
    assert stats.d3() == stats.d3()
    assert stats.d3() is not stats.d3()


def test_plan_is_built_once():
    assert field_plan(GenericStats, StatsT9) is field_plan(GenericStats, StatsT9)


@pytest.mark.parametrize("target", [StatsS7, StatsS9, StatsT9, StatsD3, StatsL3])
def test_every_model_field_exists_in_generic_record(target):
    missing = set(target.model_fields) - set(GenericStats.model_fields)
    assert not missing


def test_source_record_is_untouched():
    stats = make_stats(**{"GHS 5s": "1.5"})
    stats.s7()
    assert stats.ghs_5s == AmbiguousNumber.of(1.5)
