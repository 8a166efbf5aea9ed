"""Tool registry and preference-based tool selection."""

from .base import ToolRegistry, tool_names

__all__ = ["ToolRegistry", "tool_names"]
