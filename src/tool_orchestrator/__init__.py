"""Tool Orchestrator - extract, normalize and concurrently run LLM tool calls."""

from .core import (
    ToolOrchestrator,
    TextGenerationContext,
    ToolRegistry,
    ToolDefinition,
    ToolInput,
    ToolConfig,
    ToolCall,
    ToolResult,
    ToolResultStatus,
    MetricsRegistry,
    OrchestratorSettings,
    UserMessage,
    AssistantMessage,
    SystemMessage,
    MessageFile,
)
from .endpoints import OpenAIEndpoint

__all__ = [
    "ToolOrchestrator",
    "TextGenerationContext",
    "ToolRegistry",
    "ToolDefinition",
    "ToolInput",
    "ToolConfig",
    "ToolCall",
    "ToolResult",
    "ToolResultStatus",
    "MetricsRegistry",
    "OrchestratorSettings",
    "UserMessage",
    "AssistantMessage",
    "SystemMessage",
    "MessageFile",
    "OpenAIEndpoint",
]
