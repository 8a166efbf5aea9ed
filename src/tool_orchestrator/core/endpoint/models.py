"""The contract between the orchestrator and a text-generation endpoint."""

from typing import Any, AsyncIterator, Awaitable, Dict, List, Optional, Protocol, Sequence, Union

from pydantic import BaseModel, Field

from ..messages.models import BaseMessage
from ..tools.models import ToolCall, ToolDefinition


class Token(BaseModel):
    """One generated token or chunk.

    Attributes:
        text: Text of the chunk.
        special: Whether the token is a control token rather than visible text.
        tool_calls: Tool calls the model requested natively. Already normalized.
    """

    text: str = ""
    special: bool = False
    tool_calls: Optional[List[ToolCall]] = None


class EndpointOutput(BaseModel):
    """One element of an endpoint's output stream.

    ``generated_text`` holds the complete generated text and is only set on the final
    element of the stream.
    """

    token: Token = Field(default_factory=Token)
    generated_text: Optional[str] = None


class Endpoint(Protocol):
    """
    Protocol for text-generation endpoints driven by the orchestrator.

    Implementations return an async iterator of outputs, or an awaitable resolving to one.
    """

    def __call__(
        self,
        *,
        messages: Sequence[BaseMessage],
        preprompt: Optional[str],
        generate_settings: Optional[Dict[str, Any]],
        tools: Sequence[ToolDefinition],
    ) -> Union[AsyncIterator[EndpointOutput], Awaitable[AsyncIterator[EndpointOutput]]]:
        ...
