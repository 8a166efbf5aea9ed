from .models import (
    ToolDefinition,
    ToolInput,
    ToolConfig,
    ToolOutput,
    ToolCall,
    ToolResult,
    ToolResultStatus,
    ExternalToolCall,
    find_tool,
    is_external_tool_call,
)
from .schema import CallNormalizer, ToolInputFactory
from .builtin import DIRECTLY_ANSWER, WEBSEARCH, WebSearchBackend
from .registry import ToolRegistry
from .parsing import CallExtractor, parse_tool_call_block
from .execution import Assistant, Conversation, ToolContext, ToolExecutor

__all__ = [
    "ToolDefinition",
    "ToolInput",
    "ToolConfig",
    "ToolOutput",
    "ToolCall",
    "ToolResult",
    "ToolResultStatus",
    "ExternalToolCall",
    "find_tool",
    "is_external_tool_call",
    "CallNormalizer",
    "ToolInputFactory",
    "DIRECTLY_ANSWER",
    "WEBSEARCH",
    "WebSearchBackend",
    "ToolRegistry",
    "CallExtractor",
    "parse_tool_call_block",
    "Assistant",
    "Conversation",
    "ToolContext",
    "ToolExecutor",
]
