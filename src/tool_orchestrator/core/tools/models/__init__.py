"""Tool-related data models."""

from .models import ToolDefinition, ToolInput, ToolConfig, ToolOutput, find_tool
from .tool_call import ExternalToolCall, ToolCall, ToolResult, ToolResultStatus, is_external_tool_call

__all__ = [
    "ToolDefinition",
    "ToolInput",
    "ToolConfig",
    "ToolOutput",
    "find_tool",
    "ExternalToolCall",
    "ToolCall",
    "ToolResult",
    "ToolResultStatus",
    "is_external_tool_call",
]
