"""Turn-level orchestration of tool calls."""

from .files_prompt import make_files_prompt, with_files_prompt
from .orchestrator import TextGenerationContext, ToolOrchestrator

__all__ = ["make_files_prompt", "with_files_prompt", "TextGenerationContext", "ToolOrchestrator"]
