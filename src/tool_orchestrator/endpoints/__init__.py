"""Collect concrete text-generation endpoint implementations."""

from .openai_api import OpenAIEndpoint

__all__ = ["OpenAIEndpoint"]
