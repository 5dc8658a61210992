"""Log document shapes."""

from __future__ import annotations

import copy
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictStr, field_validator

EntryKind = Literal["info", "warn", "error", "log", "debug"]
Method = Literal[
    "get",
    "post",
    "put",
    "delete",
    "patch",
    "head",
    "options",
    "trace",
    "connect",
]

ROOT_AREA = "root"


class LogEntry(BaseModel):
    """One timestamped line inside an area."""

    model_config = ConfigDict(frozen=True)

    kind: EntryKind = Field(validation_alias=AliasChoices("kind", "type"))
    message: str
    payload: Any = None
    timestamp: int

    @field_validator("payload")
    @classmethod
    def _detach_payload(cls, value: Any) -> Any:
        return copy.deepcopy(value)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind, "message": self.message}
        if self.payload is not None:
            data["payload"] = copy.deepcopy(self.payload)
        data["timestamp"] = self.timestamp
        return data


class ErrorPayload(BaseModel):
    message: str
    stack: list[str] = Field(default_factory=list)


class Details(BaseModel):
    """Request details; ``service`` seeds event id generation."""

    model_config = ConfigDict(extra="allow")

    service: StrictStr = Field(min_length=1)


class RootPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    path: str
    method: Method | None = None
    details: dict[str, Any]
    event_id: str = Field(alias="eventId")
    parent_event_id: str | None = Field(default=None, alias="parentEventId")

    @field_validator("method", mode="before")
    @classmethod
    def _lower_method(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value

    def to_dict(self) -> dict[str, Any]:
        exclude = None if self.parent_event_id else {"parent_event_id"}
        return self.model_dump(by_alias=True, exclude=exclude)


LogDocument = dict[str, list[LogEntry]]
