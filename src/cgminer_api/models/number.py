"""
AmbiguousNumber — a numeric API value that can arrive as a bare number,
a quoted number, an empty string or null.

Different firmware builds encode the same field differently (S7 sends
``"GHS 5s": 13630.55``, S9 sends ``"GHS 5s": "13630.55"``, idle chains send
``""``), so these fields decode into one tagged value instead of a plain
float.
"""

import json
import math
import re
from dataclasses import dataclass
from typing import Annotated, Any, Optional

from pydantic import PlainSerializer, PlainValidator

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class AmbiguousNumber:
    value: float = 0.0
    present: bool = False

    @classmethod
    def absent(cls) -> "AmbiguousNumber":
        return cls()

    @classmethod
    def of(cls, value: float) -> "AmbiguousNumber":
        return cls(float(value), True)

    @classmethod
    def parse(cls, raw: Any) -> "AmbiguousNumber":
        """Decode a JSON value already produced by the JSON parser.

        ``None`` and ``""`` mean "no data". Strings must hold a plain decimal
        literal. Objects, arrays, booleans and non-finite values are rejected.
        """
        if isinstance(raw, AmbiguousNumber):
            return raw
        if raw is None or raw == "":
            return cls.absent()
        if isinstance(raw, (dict, list, tuple, bool)):
            raise ValueError(f"value is not a number - {_render(raw)}")
        if not isinstance(raw, (int, float)) and not (isinstance(raw, str) and _DECIMAL.fullmatch(raw)):
            raise ValueError(f"value is not a number - {_render(raw)}")
        try:
            value = float(raw)
        except OverflowError:
            value = math.inf
        # Infinity/NaN tokens and out-of-range literals such as "1e400"
        if not math.isfinite(value):
            raise ValueError(f"value is not a number - {_render(raw)}")
        return cls.of(value)

    def to_float(self) -> float:
        return self.value

    def to_int(self) -> int:
        # half away from zero, not banker's rounding
        return int(math.copysign(math.floor(abs(self.value) + 0.5), self.value))

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return self.present

    def __str__(self) -> str:
        return repr(self.value)


def _render(raw: Any) -> str:
    try:
        return json.dumps(raw)
    except (TypeError, ValueError):
        return repr(raw)


def _serialize(number: AmbiguousNumber) -> Optional[float]:
    return number.value if number.present else None


Number = Annotated[
    AmbiguousNumber,
    PlainValidator(AmbiguousNumber.parse),
    PlainSerializer(_serialize),
]
