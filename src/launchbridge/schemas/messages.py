"""Pydantic models for the request and progress wire formats."""

import uuid
from typing import Any

import orjson
from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """A single named request sent to the backend environment.

    Messages are immutable and owned by the call that creates them.
    """

    call_name: str = Field(
        description="Name of the backend call",
        min_length=1,
        json_schema_extra={"example": "clone_mod"},
    )
    args: tuple[str, ...] | None = Field(
        default=None,
        description="Positional string arguments; meaning is call-specific",
        json_schema_extra={"example": ["sd:/ultimate/mods/a", "sd:/ultimate/mods/b"]},
    )
    request_id: str = Field(
        default_factory=lambda: uuid.uuid4().hex,
        description="Identifier echoed back on progress events for this call",
        min_length=1,
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_wire(self) -> dict[str, Any]:
        """Return the plain-dict form handed to the host bridge."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        """Serialize the message to JSON text."""
        return orjson.dumps(self.to_wire()).decode()


class Progress(BaseModel):
    """Incremental status of a long-running call.

    Transports may attach additional fields; they are preserved.
    """

    title: str = Field(default="", description="Short description of the step")
    info: str = Field(default="", description="Detail for the current step")
    progress: float = Field(
        default=0.0,
        description="Completion amount; scale and sentinels are transport-defined",
    )
    request_id: str | None = Field(
        default=None,
        description="Request this event belongs to, when the bridge tags it",
    )

    model_config = ConfigDict(extra="allow", frozen=True)


def serialize_response(response: Any) -> str:
    """Render a bridge response as the text payload callers receive.

    Strings are returned unchanged; anything else is JSON-encoded, so a
    bridge answering ``True`` yields the ``"true"`` sentinel.
    """
    if isinstance(response, str):
        return response
    if isinstance(response, BaseModel):
        response = response.model_dump(mode="json")
    return orjson.dumps(response).decode()
