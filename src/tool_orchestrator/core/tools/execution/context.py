"""Context objects handed to tools while they run."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...messages.models import BaseMessage


class Conversation(BaseModel):
    """The conversation a turn belongs to."""

    id: str
    model: str
    title: Optional[str] = None


class Assistant(BaseModel):
    """An assistant persona. Its generation settings override the endpoint defaults."""

    id: str
    name: str
    generate_settings: Dict[str, Any] = Field(default_factory=dict)


class ToolContext(BaseModel):
    """
    Everything a tool may need besides its parameters.

    Attributes:
        conversation: The current conversation.
        messages: The conversation messages of this turn.
        preprompt: System prompt of the turn, if any.
        assistant: The assistant, when the conversation uses one.
        ip: Client address, for tools that rate-limit or geolocate.
        username: The user the turn runs for.
        web_search: Search backend used by the web search tool.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    conversation: Conversation
    messages: List[BaseMessage] = Field(default_factory=list)
    preprompt: Optional[str] = None
    assistant: Optional[Assistant] = None
    ip: Optional[str] = None
    username: Optional[str] = None
    web_search: Optional[Any] = None
