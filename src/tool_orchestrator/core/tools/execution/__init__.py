"""Tool execution."""

from .context import Assistant, Conversation, ToolContext
from .executor import CallToolStream, ToolExecutor

__all__ = ["Assistant", "Conversation", "ToolContext", "CallToolStream", "ToolExecutor"]
