"""Export the tool-related exception hierarchy used across parsing and execution paths."""

from .exceptions import (
    ToolOrchestratorError,
    ToolRegistrationError,
    ToolNotFoundError,
    ToolExecutionError,
    ToolValidationError,
    ToolCallParseError,
)

__all__ = [
    "ToolOrchestratorError",
    "ToolRegistrationError",
    "ToolNotFoundError",
    "ToolExecutionError",
    "ToolValidationError",
    "ToolCallParseError",
]
