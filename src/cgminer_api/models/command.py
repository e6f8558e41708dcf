"""
Command — one API request: a command name and an optional parameter.
"""

import json
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Command(BaseModel):
    name: str = Field(min_length=1)
    parameter: Optional[str] = None

    model_config = {"frozen": True}

    @field_validator("parameter")
    @classmethod
    def _empty_is_absent(cls, value: Optional[str]) -> Optional[str]:
        # the firmware treats "parameter": "" differently from no parameter
        return value or None

    def encode(self) -> bytes:
        """Wire request bytes. Commas inside the parameter are sent as-is."""
        request: dict[str, str] = {"command": self.name}
        if self.parameter:
            request["parameter"] = self.parameter
        return json.dumps(request, separators=(",", ":")).encode("utf-8")
