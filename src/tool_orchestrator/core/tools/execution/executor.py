"""Execution of a single resolved tool call with progress reporting and failure isolation."""

from __future__ import annotations

import asyncio
import inspect
import time
from contextlib import aclosing
from typing import Any, AsyncGenerator, Callable, Dict, Optional, Sequence, Union
from uuid import uuid4

from ..models import ToolCall, ToolDefinition, ToolOutput, ToolResult, ToolResultStatus, find_tool
from ...messages.updates import (
    BaseUpdate,
    MessageUpdate,
    ToolCallUpdate,
    ToolErrorUpdate,
    ToolProgressUpdate,
    ToolResultUpdate,
)
from ...metrics import MetricsRegistry
from ...streams import Return
from ...logger import get_logger

logger = get_logger(__name__)

CallToolStream = AsyncGenerator[Union[MessageUpdate, Return[Optional[ToolResult]]], None]


class ToolExecutor:
    """Runs tool calls one at a time per stream; many streams may run concurrently.

    Each call is isolated: whatever a tool raises is logged, counted and turned into
    a generic error event and result. Internal error detail never reaches the stream.
    """

    def __init__(self, metrics: Optional[MetricsRegistry] = None, error_message: str = "Error occurred") -> None:
        """Initialize the executor.

        Args:
            metrics: Registry receiving tool usage counters and durations.
            error_message: Message reported to the caller when a tool fails.
        """
        self.metrics = metrics or MetricsRegistry()
        self.error_message = error_message

    async def call_tool(self, context: Any, tools: Sequence[ToolDefinition], call: ToolCall) -> CallToolStream:
        """Run one call.

        Args:
            context: Tool context handed to tools that declare a ``context`` parameter.
            tools: The tools active for this turn.
            call: The call to run.

        Returns:
            An async generator yielding the ``ToolCallUpdate``, the tool's progress updates and
            the terminal ``ToolResultUpdate`` or ``ToolErrorUpdate``, followed by
            ``Return(result)``. ``Return(None)`` means the no-op tool was called.
        """
        uuid = str(uuid4())

        tool = find_tool(call.name, list(tools))
        if tool is None:
            logger.warning(f"Tool '{call.name}' not found among the active tools.")
            yield Return(ToolResult.error(call, f'Could not find tool "{call.name}"'))
            return

        # The model chose to answer without a tool
        if tool.is_no_op:
            yield Return(None)
            return

        start_time = time.monotonic()
        self.metrics.tool.tool_use_count.inc({"tool": call.name})

        yield ToolCallUpdate(uuid=uuid, call=call)

        output = ToolOutput()
        try:
            logger.info(f"Executing tool '{call.name}'...")
            async with aclosing(self._run_tool(tool, call, context)) as items:
                async for item in items:
                    if isinstance(item, ToolOutput):
                        output = item
                        continue
                    yield self._stamp(item, uuid)
        except Exception as exc:
            self.metrics.tool.tool_use_count_error.inc({"tool": call.name})
            logger.error(f"Failed while running tool {call.name}. {type(exc).__name__}: {exc}", exc_info=True)

            yield ToolErrorUpdate(uuid=uuid, message=self.error_message)
            yield Return(ToolResult.error(call, self.error_message))
            return

        result = ToolResult(
            call=call,
            status=ToolResultStatus.SUCCESS,
            outputs=output.outputs,
            display=output.display,
        )
        yield ToolResultUpdate(uuid=uuid, result=result)

        self.metrics.tool.tool_use_duration.observe({"tool": call.name}, (time.monotonic() - start_time) * 1000)
        logger.info(f"Tool '{call.name}' executed successfully.")
        yield Return(result)

    async def _run_tool(
        self, tool: ToolDefinition, call: ToolCall, context: Any
    ) -> AsyncGenerator[Union[BaseUpdate, ToolOutput], None]:
        """Invoke the tool function, whatever its shape, and yield its updates then its output."""
        func = tool.func
        kwargs = self._build_kwargs(func, call.parameters, context)

        if inspect.isasyncgenfunction(func):
            value: Any = None
            async with aclosing(func(**kwargs)) as updates:
                async for item in updates:
                    if isinstance(item, Return):
                        value = item.value
                    elif isinstance(item, BaseUpdate):
                        yield item
                    else:
                        value = item
            yield ToolOutput.from_value(value, tool.name)
            return

        if inspect.iscoroutinefunction(func):
            yield ToolOutput.from_value(await func(**kwargs), tool.name)
            return

        result = await asyncio.to_thread(func, **kwargs)
        if inspect.isawaitable(result):
            result = await result
        yield ToolOutput.from_value(result, tool.name)

    @staticmethod
    def _build_kwargs(func: Callable[..., Any], parameters: Dict[str, Any], context: Any) -> Dict[str, Any]:
        try:
            signature = inspect.signature(func)
        except (TypeError, ValueError):
            return dict(parameters)

        accepted = signature.parameters
        if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in accepted.values()):
            kwargs = dict(parameters)
        else:
            kwargs = {name: value for name, value in parameters.items() if name in accepted}
        if "context" in accepted:
            kwargs["context"] = context
        return kwargs

    @staticmethod
    def _stamp(update: BaseUpdate, uuid: str) -> BaseUpdate:
        if isinstance(update, ToolProgressUpdate) and update.uuid is None:
            return update.model_copy(update={"uuid": uuid})
        return update
