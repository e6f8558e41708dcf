import json

import pytest
from click.testing import CliRunner

import cgminer_api.cli.main as cli_main
from cgminer_api.errors import ConnectError
from cgminer_api.models.pools import Pool
from cgminer_api.models.stats import GenericStats
from cgminer_api.models.version import Version


class FakeClient:
    calls: list = []

    def __init__(self, host, port, timeout):
        FakeClient.calls.append(("init", host, port, timeout))

    async def version(self):
        return Version(BMMiner="2.0.0", Type="Antminer S9")

    async def stats(self):
        return GenericStats.model_validate({"Type": "Antminer S9", "GHS 5s": "13630.55", "temp6": 56})

    async def pools(self):
        return [Pool(POOL=0, URL="stratum+tcp://a:3333", User="w.1", Status="Alive")]

    async def enable_pool(self, index):
        FakeClient.calls.append(("enable_pool", index))

    async def summary(self):
        raise ConnectError("Cannot connect to 10.0.0.9:4028: refused")


@pytest.fixture
def runner(monkeypatch, tmp_path):
    FakeClient.calls = []
    monkeypatch.setattr(cli_main, "AsyncCGMiner", FakeClient)
    monkeypatch.setattr(cli_main, "CONFIG_FILE", tmp_path / "config.json")
    return CliRunner()


def test_version_json(runner):
    result = runner.invoke(cli_main.main, ["--host", "10.0.0.9", "version", "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["BMMiner"] == "2.0.0"
    assert data["Type"] == "Antminer S9"
    assert FakeClient.calls[0] == ("init", "10.0.0.9", 4028, 5.0)


def test_stats_narrowed_json(runner):
    result = runner.invoke(cli_main.main, ["--host", "10.0.0.9", "stats", "--model", "s9", "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["GHS 5s"] == 13630.55
    assert data["temp6"] == 56
    assert "temp31" not in data


def test_pools_table(runner):
    result = runner.invoke(cli_main.main, ["--host", "10.0.0.9", "pools"])
    assert result.exit_code == 0, result.output
    assert "Pools (1)" in result.output

    result = runner.invoke(cli_main.main, ["--host", "10.0.0.9", "pools", "--json"])
    assert json.loads(result.output)[0]["URL"] == "stratum+tcp://a:3333"


def test_pool_enable(runner):
    result = runner.invoke(cli_main.main, ["--host", "10.0.0.9", "pool", "enable", "3"])
    assert result.exit_code == 0, result.output
    assert ("enable_pool", 3) in FakeClient.calls


def test_host_from_env_and_config(runner, tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"host": "10.0.0.1", "port": 4029, "timeout": 2}))
    result = runner.invoke(cli_main.main, ["version", "--json"])
    assert result.exit_code == 0, result.output
    assert FakeClient.calls[-1] == ("init", "10.0.0.1", 4029, 2.0)

    result = runner.invoke(cli_main.main, ["version", "--json"], env={"CGMINER_HOST": "10.0.0.2"})
    assert FakeClient.calls[-1] == ("init", "10.0.0.2", 4029, 2.0)


def test_missing_host(runner):
    result = runner.invoke(cli_main.main, ["version"])
    assert result.exit_code == 1


def test_error_exits_nonzero(runner):
    result = runner.invoke(cli_main.main, ["--host", "10.0.0.9", "summary"])
    assert result.exit_code == 1
    assert "ConnectError" in result.output
