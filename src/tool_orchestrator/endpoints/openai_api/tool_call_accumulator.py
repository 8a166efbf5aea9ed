"""Streaming tool-call argument accumulator.

OpenAI-compatible streaming delivers tool-call JSON arguments split across chunks.
Fragments are accumulated per tool-call index until the stream ends.

Parsing is best-effort: an invalid tool call is logged and dropped, never raised.
"""

from __future__ import annotations

import json
from typing import Dict, List, Optional

from ...core.tools.models import ToolCall
from ...core.logger import get_logger

logger = get_logger(__name__)


class ToolCallAccumulator:
    """Accumulate streamed tool-call deltas into ToolCall objects."""

    def __init__(self) -> None:
        self._buffers: Dict[int, str] = {}
        self._names: Dict[int, str] = {}
        self._seen_order: List[int] = []

    def add_delta(self, index: int, name: Optional[str] = None, arguments: Optional[str] = None) -> None:
        """Consume one streamed fragment of the tool call at position ``index``."""
        if index not in self._buffers:
            self._buffers[index] = ""
            self._seen_order.append(index)

        if name and index not in self._names:
            self._names[index] = name

        if arguments:
            self._buffers[index] += arguments

    def finalize(self) -> List[ToolCall]:
        """Parse every accumulated call, in the order the calls first appeared."""
        tool_calls: List[ToolCall] = []
        for index in self._seen_order:
            raw = self._buffers.get(index, "")
            name = self._names.get(index)
            if not name:
                logger.warning("Dropping streamed tool call #%d without a name.", index)
                continue
            try:
                parsed = json.loads(raw) if raw else {}
            except json.JSONDecodeError as exc:
                logger.warning("Dropping tool call '%s': arguments are not valid JSON (%s).", name, exc)
                continue
            if not isinstance(parsed, dict):
                logger.warning("Dropping tool call '%s': arguments must decode to a JSON object.", name)
                continue
            tool_calls.append(ToolCall(name=name, parameters=parsed))
        return tool_calls
