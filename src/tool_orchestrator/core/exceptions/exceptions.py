"""
Custom exception classes for the tool orchestrator.

This module defines a hierarchy of exceptions used to handle errors during
tool registration, call parsing, validation, and execution.
"""


class ToolOrchestratorError(Exception):
    """Base exception for all tool-related errors."""

    pass


class ToolRegistrationError(ToolOrchestratorError):
    """Raised when there is an error registering a tool."""

    pass


class ToolNotFoundError(ToolOrchestratorError):
    """Raised when a requested tool is not found in the registry."""

    pass


class ToolExecutionError(ToolOrchestratorError):
    """Raised when a tool fails during execution."""

    pass


class ToolValidationError(ToolOrchestratorError):
    """Raised when tool parameters or definition are invalid."""

    pass


class ToolCallParseError(ToolOrchestratorError):
    """Raised when a tool-call block in generated text cannot be parsed."""

    pass
