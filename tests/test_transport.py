import asyncio
import json

import pytest

from cgminer_api.errors import APIError, DecodeError, TransportError
from cgminer_api.models.command import Command
from cgminer_api.models.envelope import Envelope, StatusEntry
from cgminer_api.models.stats import StatsResponse
from cgminer_api.models.version import VersionResponse
from cgminer_api.transport.envelope import check_status, decode_envelope
from cgminer_api.transport.framing import needs_repair, read_frame, repair_payload
from cgminer_api.transport.json_transport import JSONTransport


def _reader(data: bytes) -> asyncio.StreamReader:
    reader = asyncio.StreamReader()
    reader.feed_data(data)
    reader.feed_eof()
    return reader


class _ResetReader:
    async def readuntil(self, separator: bytes = b"\n") -> bytes:
        raise ConnectionResetError("Connection reset by peer")


class _Writer:
    def __init__(self):
        self.sent = b""

    def write(self, data: bytes) -> None:
        self.sent += data

    async def drain(self) -> None:
        pass


class _Connection:
    address = "10.0.0.9:4028"

    def __init__(self, reader):
        self.reader = reader
        self.writer = _Writer()


class TestCommandEncoding:
    def test_without_parameter(self):
        assert Command(name="version").encode() == b'{"command":"version"}'

    def test_empty_parameter_is_omitted(self):
        cmd = Command(name="summary", parameter="")
        assert cmd.parameter is None
        assert b"parameter" not in cmd.encode()

    def test_with_parameter(self):
        assert Command(name="enablepool", parameter="1").encode() == b'{"command":"enablepool","parameter":"1"}'

    def test_commas_pass_through(self):
        cmd = Command(name="addpool", parameter="stratum+tcp://pool:3333,worker,x,y")
        assert json.loads(cmd.encode())["parameter"] == "stratum+tcp://pool:3333,worker,x,y"

    def test_name_required(self):
        with pytest.raises(ValueError):
            Command(name="")


class TestFraming:
    @pytest.mark.asyncio
    async def test_strips_terminator(self):
        assert await read_frame(_reader(b'{"id":1}\x00')) == b'{"id":1}'

    @pytest.mark.asyncio
    async def test_unterminated_frame_is_usable(self):
        assert await read_frame(_reader(b'{"id":1}')) == b'{"id":1}'

    @pytest.mark.asyncio
    async def test_empty_stream(self):
        assert await read_frame(_reader(b"")) == b""

    @pytest.mark.asyncio
    async def test_stops_at_first_terminator(self):
        reader = _reader(b'{"id":1}\x00trailing')
        assert await read_frame(reader) == b'{"id":1}'

    @pytest.mark.asyncio
    async def test_connection_reset_propagates(self):
        with pytest.raises(ConnectionResetError):
            await read_frame(_ResetReader())


class TestRepair:
    def test_merges_concatenated_objects(self):
        repaired = repair_payload(b'{"STATS":0}{"id":1}')
        assert repaired == b'{"STATS":0,"id":1}'
        assert json.loads(repaired) == {"STATS": 0, "id": 1}

    def test_no_pattern_is_unchanged(self):
        payload = b'{"STATUS":[],"id":1}'
        assert repair_payload(payload) == payload

    def test_replaces_only_first_occurrence(self):
        assert repair_payload(b'{"a":1}{"b":"}{"}') == b'{"a":1,"b":"}{"}'

    def test_only_stats_is_repaired(self):
        assert needs_repair("stats")
        for command in ("summary", "version", "pools", "devs", "Stats"):
            assert not needs_repair(command)


class TestStatusInterpreter:
    @staticmethod
    def entry(status: str, code: int = 1, msg: str = "msg", description: str = "desc") -> StatusEntry:
        return StatusEntry(STATUS=status, When=1, Code=code, Msg=msg, Description=description)

    def test_non_failing_severities(self):
        check_status([])
        check_status([self.entry("S"), self.entry("I"), self.entry("W"), self.entry("X")])

    @pytest.mark.parametrize("severity", ["E", "F"])
    def test_failure_carries_entry(self, severity):
        entry = self.entry(severity, code=45, msg="Access denied", description="cgminer 4.9.0")
        with pytest.raises(APIError) as exc_info:
            check_status([self.entry("S"), entry])
        err = exc_info.value
        assert err.status_code == 45
        assert err.msg == "Access denied"
        assert err.description == "cgminer 4.9.0"
        assert err.severity == severity
        assert "Code: 45, Msg: 'Access denied', Description: 'cgminer 4.9.0'" in str(err)

    def test_fatal_is_labelled(self):
        with pytest.raises(APIError, match="FATAL"):
            check_status([self.entry("F")])

    def test_first_failure_wins(self):
        with pytest.raises(APIError) as exc_info:
            check_status([self.entry("W"), self.entry("E", code=1), self.entry("F", code=2)])
        assert exc_info.value.status_code == 1


class TestDecode:
    def test_generic_envelope_ignores_payload_keys(self):
        env = decode_envelope(b'{"STATUS":[{"STATUS":"S","Code":7}],"id":3,"POOLS":[]}', Envelope)
        assert env.id == 3
        assert env.status[0].code == 7

    def test_bad_json_is_decode_error(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_envelope(b'{"d,k', VersionResponse, "version")
        assert exc_info.value.__cause__ is not None
        assert "'version'" in str(exc_info.value)

    def test_out_of_range_number_is_decode_error(self):
        payload = b'{"STATUS":[{"STATUS":"S","Code":70}],"id":1,"STATS":[{"GHS 5s":"1e400"}]}'
        with pytest.raises(DecodeError):
            decode_envelope(payload, StatsResponse, "stats")


class TestExecute:
    @pytest.mark.asyncio
    async def test_read_reset_is_transport_error(self):
        conn = _Connection(_ResetReader())
        with pytest.raises(TransportError) as exc_info:
            await JSONTransport().execute(conn, Command(name="summary"))
        assert isinstance(exc_info.value.__cause__, ConnectionResetError)
        assert "'summary'" in str(exc_info.value)
        assert conn.writer.sent == b'{"command":"summary"}'

    @pytest.mark.asyncio
    async def test_decodes_reply(self):
        conn = _Connection(_reader(b'{"STATUS":[{"STATUS":"S","Code":22}],"id":1,"VERSION":[{"Type":"Antminer S9"}]}\x00'))
        resp = await JSONTransport().execute(conn, Command(name="version"), VersionResponse)
        assert resp.version[0].type == "Antminer S9"
