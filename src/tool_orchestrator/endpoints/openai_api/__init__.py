"""Expose the OpenAI-compatible endpoint implementation."""

from .endpoint import OpenAIEndpoint
from .tool_call_accumulator import ToolCallAccumulator

__all__ = ["OpenAIEndpoint", "ToolCallAccumulator"]
