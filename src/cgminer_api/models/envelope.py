"""
Response envelope shared by every command:

    {"STATUS": [{"STATUS": "S", "When": ..., "Code": ..., "Msg": ..., "Description": ...}],
     "id": 1,
     "<PAYLOAD KEY>": [...]}
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Severity(str, Enum):
    SUCCESS = "S"
    INFORMATION = "I"
    WARNING = "W"
    ERROR = "E"
    FATAL = "F"


class StatusEntry(BaseModel):
    status: str = Field("", alias="STATUS")
    when: int = Field(0, alias="When")
    code: int = Field(0, alias="Code")
    msg: str = Field("", alias="Msg")
    description: str = Field("", alias="Description")

    model_config = {"populate_by_name": True}

    @property
    def severity(self) -> Optional[Severity]:
        """Decoded severity letter; None for letters the firmware invented."""
        try:
            return Severity(self.status)
        except ValueError:
            return None

    @property
    def is_failure(self) -> bool:
        return self.severity in (Severity.ERROR, Severity.FATAL)


class Envelope(BaseModel):
    """Generic response: status list and id, payload keys ignored."""
    status: list[StatusEntry] = Field(default_factory=list, alias="STATUS")
    id: int = 0

    model_config = {"populate_by_name": True}


class Record(BaseModel):
    """Base for payload records; wire names are aliases, field names work too."""

    model_config = {"populate_by_name": True, "coerce_numbers_to_str": True}
