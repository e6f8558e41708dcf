"""
cgminer-api error types.

Every failure raised by the client is a CGMinerError; the underlying
exception, when there is one, is kept as ``__cause__``.
"""

from typing import Any, Optional


class CGMinerError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ConnectError(CGMinerError):
    """Dialing the device failed (refused, unreachable, DNS, timeout)."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("connect_error", message, details)


class TransportError(CGMinerError):
    """Write or read failed after the connection was established."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("transport_error", message, details)


class DecodeError(CGMinerError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("decode_error", message, details)


class CardinalityError(CGMinerError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("cardinality_error", message, details)


class APIError(CGMinerError):
    """The device reported an Error or Fatal status entry."""

    def __init__(
        self,
        message: str,
        severity: str,
        status_code: int,
        msg: str = "",
        description: str = "",
        entry: Any = None,
    ):
        super().__init__(
            "api_error",
            message,
            {"severity": severity, "code": status_code, "msg": msg, "description": description},
        )
        self.severity = severity
        self.status_code = status_code
        self.msg = msg
        self.description = description
        self.entry = entry
