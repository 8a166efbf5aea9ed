"""Public exports for the core tool orchestration abstractions and utilities."""

from .tools import (
    ToolRegistry,
    ToolDefinition,
    ToolInput,
    ToolConfig,
    ToolOutput,
    ToolCall,
    ToolResult,
    ToolResultStatus,
    ExternalToolCall,
    CallExtractor,
    CallNormalizer,
    ToolExecutor,
    ToolContext,
    Conversation,
    Assistant,
    WebSearchBackend,
    DIRECTLY_ANSWER,
    WEBSEARCH,
    parse_tool_call_block,
)
from .exceptions import (
    ToolOrchestratorError,
    ToolRegistrationError,
    ToolNotFoundError,
    ToolExecutionError,
    ToolValidationError,
    ToolCallParseError,
)
from .logger import get_logger, setup_logging
from .config import OrchestratorSettings
from .messages import (
    BaseMessage,
    UserMessage,
    AssistantMessage,
    SystemMessage,
    MessageFile,
    MessageUpdate,
    StatusUpdate,
    ToolCallUpdate,
    ToolResultUpdate,
    ToolErrorUpdate,
    ToolProgressUpdate,
)
from .metrics import MetricsRegistry
from .streams import Return, ReturningGenerator, merge_async_generators
from .endpoint import Endpoint, EndpointOutput, Token
from .orchestration import ToolOrchestrator, TextGenerationContext, make_files_prompt

__all__ = [
    "ToolRegistry",
    "ToolDefinition",
    "ToolInput",
    "ToolConfig",
    "ToolOutput",
    "ToolCall",
    "ToolResult",
    "ToolResultStatus",
    "ExternalToolCall",
    "CallExtractor",
    "CallNormalizer",
    "ToolExecutor",
    "ToolContext",
    "Conversation",
    "Assistant",
    "WebSearchBackend",
    "DIRECTLY_ANSWER",
    "WEBSEARCH",
    "parse_tool_call_block",
    "ToolOrchestratorError",
    "ToolRegistrationError",
    "ToolNotFoundError",
    "ToolExecutionError",
    "ToolValidationError",
    "ToolCallParseError",
    "get_logger",
    "setup_logging",
    "OrchestratorSettings",
    "BaseMessage",
    "UserMessage",
    "AssistantMessage",
    "SystemMessage",
    "MessageFile",
    "MessageUpdate",
    "StatusUpdate",
    "ToolCallUpdate",
    "ToolResultUpdate",
    "ToolErrorUpdate",
    "ToolProgressUpdate",
    "MetricsRegistry",
    "Return",
    "ReturningGenerator",
    "merge_async_generators",
    "Endpoint",
    "EndpointOutput",
    "Token",
    "ToolOrchestrator",
    "TextGenerationContext",
    "make_files_prompt",
]
