"""Map untrusted model-written calls onto the declared inputs of registered tools."""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..models import ExternalToolCall, ToolCall, ToolDefinition, find_tool
from ...logger import get_logger

logger = get_logger(__name__)


class CallNormalizer:
    """
    Resolves an ExternalToolCall against the available tools.

    Rejection is never an exception: an unknown tool or a missing required parameter
    yields ``None`` and a debug log line, and the caller filters it out.
    """

    def normalize(self, external: ExternalToolCall, tools: Sequence[ToolDefinition]) -> Optional[ToolCall]:
        """Normalize a single external call.

        Args:
            external: The call as parsed from model output.
            tools: The tools available for this turn.

        Returns:
            The resolved call carrying the tool's canonical name, or None if it was rejected.
        """
        tool = find_tool(external.tool_name, list(tools))
        if tool is None:
            logger.debug(f"Model requested tool that does not exist: '{external.tool_name}'. Skipping tool...")
            return None

        parameters: Dict[str, Any] = {}
        for tool_input in tool.inputs:
            if tool_input.required:
                if tool_input.name not in external.parameters:
                    logger.debug(
                        f"Model requested tool '{external.tool_name}' but was missing required parameter "
                        f"'{tool_input.name}'. Skipping tool..."
                    )
                    return None
                parameters[tool_input.name] = external.parameters[tool_input.name]
                continue

            value = external.parameters.get(tool_input.name)
            parameters[tool_input.name] = tool_input.default if value is None else value

        return ToolCall(name=tool.name, parameters=parameters)

    def normalize_all(
        self, calls: Iterable[Union[ExternalToolCall, ToolCall]], tools: Sequence[ToolDefinition]
    ) -> List[ToolCall]:
        """Normalize external calls, pass native calls through and drop rejected ones."""
        normalized: List[ToolCall] = []
        for call in calls:
            if isinstance(call, ToolCall):
                normalized.append(call)
                continue
            tool_call = self.normalize(call, tools)
            if tool_call is not None:
                normalized.append(tool_call)
        return normalized
