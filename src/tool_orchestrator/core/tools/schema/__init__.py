"""Tool input declaration and call normalization."""

from .tool_input_factory import ToolInputFactory
from .normalizer import CallNormalizer

__all__ = ["ToolInputFactory", "CallNormalizer"]
