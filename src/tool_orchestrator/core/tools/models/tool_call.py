"""Data models for tool call requests and their outcomes."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError


class ExternalToolCall(BaseModel):
    """The untrusted call shape models write into JSON blocks.

    Nothing is enforced beyond the shape: required inputs and defaults are checked by the normalizer.
    """

    tool_name: StrictStr
    parameters: Dict[str, Any]


def is_external_tool_call(candidate: Any) -> bool:
    """Check whether a parsed JSON value has the ExternalToolCall shape."""
    if not isinstance(candidate, dict):
        return False
    try:
        ExternalToolCall.model_validate(candidate)
    except ValidationError:
        return False
    return True


class ToolCall(BaseModel):
    """A resolved call: every required input present and every optional input defaulted."""

    model_config = ConfigDict(frozen=True)

    name: str
    parameters: Dict[str, Any] = Field(default_factory=dict)


class ToolResultStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class ToolResult(BaseModel):
    """Terminal outcome of one call.

    Attributes:
        call: The call this result belongs to.
        status: Success or error.
        outputs: Tool payload on success.
        display: Whether the UI should show the outputs.
        message: Human-readable message on error.
    """

    model_config = ConfigDict(frozen=True)

    call: ToolCall
    status: ToolResultStatus
    outputs: List[Dict[str, Any]] = Field(default_factory=list)
    display: bool = True
    message: Optional[str] = None

    @classmethod
    def error(cls, call: ToolCall, message: str) -> "ToolResult":
        return cls(call=call, status=ToolResultStatus.ERROR, message=message)
