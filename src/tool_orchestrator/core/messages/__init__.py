"""Expose chat message models and the stream update events."""

from .models import BaseMessage, UserMessage, AssistantMessage, SystemMessage, MessageFile
from .updates import (
    BaseUpdate,
    MessageUpdate,
    StatusUpdate,
    ToolCallUpdate,
    ToolResultUpdate,
    ToolErrorUpdate,
    ToolProgressUpdate,
)

__all__ = [
    "BaseMessage",
    "UserMessage",
    "AssistantMessage",
    "SystemMessage",
    "MessageFile",
    "BaseUpdate",
    "MessageUpdate",
    "StatusUpdate",
    "ToolCallUpdate",
    "ToolResultUpdate",
    "ToolErrorUpdate",
    "ToolProgressUpdate",
]
