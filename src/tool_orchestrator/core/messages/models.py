"""Provider-agnostic message models for chat history."""

from pydantic import BaseModel, Field
from abc import ABC
from typing import List, Optional


class MessageFile(BaseModel):
    """A file attached to a message.

    Attributes:
        name: Original file name.
        mime: MIME type reported at upload.
        value: Storage reference (hash, path or URL) used by file-aware tools.
    """

    name: str
    mime: str
    value: Optional[str] = None


class BaseMessage(ABC, BaseModel):
    """Base model for messages exchanged with an LLM.

    Attributes:
        author: Role associated with the message.
        content: Text payload of the message.
        files: Files attached to the message.
    """

    author: str
    content: str
    files: List[MessageFile] = Field(default_factory=list)


class SystemMessage(BaseMessage):
    """Message authored by the system to steer behavior."""

    author: str = "system"


class UserMessage(BaseMessage):
    """Message authored by an end user."""

    author: str = "user"


class AssistantMessage(BaseMessage):
    """Message authored by the assistant."""

    author: str = "assistant"
