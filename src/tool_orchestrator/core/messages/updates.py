"""Events emitted to the caller-visible stream while tools are chosen and run."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

from ..tools.models import ToolCall, ToolResult


class BaseUpdate(BaseModel):
    """Common base of every stream event. Updates are immutable once emitted."""

    model_config = ConfigDict(frozen=True)


class StatusUpdate(BaseUpdate):
    """Turn-level status not tied to a specific tool call, e.g. a tool-call parsing failure."""

    type: Literal["status"] = "status"
    status: Literal["started", "error", "info"]
    message: Optional[str] = None


class ToolCallUpdate(BaseUpdate):
    """A call has been dispatched. ``uuid`` ties it to its later result or error."""

    type: Literal["tool"] = "tool"
    subtype: Literal["call"] = "call"
    uuid: str
    call: ToolCall


class ToolResultUpdate(BaseUpdate):
    type: Literal["tool"] = "tool"
    subtype: Literal["result"] = "result"
    uuid: str
    result: ToolResult


class ToolErrorUpdate(BaseUpdate):
    type: Literal["tool"] = "tool"
    subtype: Literal["error"] = "error"
    uuid: str
    message: str


class ToolProgressUpdate(BaseUpdate):
    """Intermediate progress reported by a running tool.

    Tools emit it without a ``uuid``; the executor stamps the invocation id before forwarding.
    """

    type: Literal["tool"] = "tool"
    subtype: Literal["progress"] = "progress"
    uuid: Optional[str] = None
    message: str


MessageUpdate = Union[StatusUpdate, ToolCallUpdate, ToolResultUpdate, ToolErrorUpdate, ToolProgressUpdate]
