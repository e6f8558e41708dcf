"""
Envelope decoding and status interpretation.
"""

from typing import Optional, TypeVar

from pydantic import ValidationError

from cgminer_api.errors import APIError, DecodeError
from cgminer_api.models.envelope import Envelope, Severity, StatusEntry

E = TypeVar("E", bound=Envelope)


def decode_envelope(payload: bytes, response_model: type[E], command: str = "") -> E:
    """Parse a payload into ``response_model``. Raises DecodeError."""
    try:
        return response_model.model_validate_json(payload)
    except ValidationError as e:
        raise DecodeError(
            f"{command!r}: cannot decode response: {e}",
            details={"payload": payload[:256].decode("utf-8", errors="replace")},
        ) from e


def check_status(statuses: list[StatusEntry], command: str = "") -> None:
    """Raise APIError for the first Error or Fatal entry, in order."""
    for entry in statuses:
        if not entry.is_failure:
            continue
        kind = "FATAL error" if entry.severity is Severity.FATAL else "error"
        raise APIError(
            f"{command!r}: API returned {kind}: Code: {entry.code}, "
            f"Msg: '{entry.msg}', Description: '{entry.description}'",
            severity=entry.status,
            status_code=entry.code,
            msg=entry.msg,
            description=entry.description,
            entry=entry,
        )


def parse_envelope(payload: bytes) -> Optional[Envelope]:
    """Parse the generic envelope. Returns None if invalid."""
    try:
        return Envelope.model_validate_json(payload)
    except ValidationError:
        return None
