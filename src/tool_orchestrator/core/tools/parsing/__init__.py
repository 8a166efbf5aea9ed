"""Tool-call extraction from model output."""

from .extractor import CallExtractor, ExtractedCall, JSON_BLOCK_PATTERN, parse_tool_call_block

__all__ = ["CallExtractor", "ExtractedCall", "JSON_BLOCK_PATTERN", "parse_tool_call_block"]
