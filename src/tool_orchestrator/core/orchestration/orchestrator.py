"""Top-level coordination of one tool-calling turn."""

import inspect
import time
from typing import Any, AsyncGenerator, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from .files_prompt import with_files_prompt
from ..config import OrchestratorSettings
from ..messages.models import BaseMessage
from ..messages.updates import MessageUpdate
from ..metrics import MetricsRegistry
from ..streams import Return, ReturningGenerator, merge_async_generators
from ..tools.execution import Assistant, Conversation, ToolContext, ToolExecutor
from ..tools.models import ToolDefinition, ToolResult
from ..tools.parsing import CallExtractor
from ..tools.registry import tool_names
from ..tools.schema import CallNormalizer
from ..logger import get_logger

logger = get_logger(__name__)


class TextGenerationContext(BaseModel):
    """
    Inputs of one turn.

    Attributes:
        endpoint: The text-generation endpoint (see ``Endpoint``).
        conversation: The conversation the turn belongs to.
        messages: Conversation messages, oldest first.
        assistant: The assistant, when the conversation uses one.
        ip: Client address.
        username: The user the turn runs for.
        web_search: Search backend made available to the web search tool.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    endpoint: Any
    conversation: Conversation
    messages: List[BaseMessage] = Field(default_factory=list)
    assistant: Optional[Assistant] = None
    ip: Optional[str] = None
    username: Optional[str] = None
    web_search: Optional[Any] = None


class ToolOrchestrator:
    """
    Drives a turn: asks the endpoint which tools to use, then runs every requested call
    concurrently while streaming their events.
    """

    def __init__(
        self,
        metrics: Optional[MetricsRegistry] = None,
        settings: Optional[OrchestratorSettings] = None,
        extractor: Optional[CallExtractor] = None,
        normalizer: Optional[CallNormalizer] = None,
        executor: Optional[ToolExecutor] = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            metrics: Registry receiving tool metrics. Shared with the default executor.
            settings: Messages and buffer sizes. Defaults to ``OrchestratorSettings()``.
            extractor: Custom call extractor.
            normalizer: Custom call normalizer.
            executor: Custom executor.
        """
        self.settings = settings or OrchestratorSettings()
        self.metrics = metrics or MetricsRegistry()
        self.extractor = extractor or CallExtractor(parse_error_message=self.settings.parse_error_message)
        self.normalizer = normalizer or CallNormalizer()
        self.executor = executor or ToolExecutor(metrics=self.metrics, error_message=self.settings.tool_error_message)

    def run_tools(
        self, ctx: TextGenerationContext, tools: Sequence[ToolDefinition], preprompt: Optional[str] = None
    ) -> ReturningGenerator[MessageUpdate, List[ToolResult]]:
        """Run the tool-calling part of a turn.

        Iterate the returned stream to receive updates as they happen; once it is exhausted
        its ``value`` holds the results of every executed call in the order the calls were
        requested. Calls to the "answer directly" tool produce neither updates nor results.

        Args:
            ctx: The turn inputs.
            tools: The tools selected for this turn.
            preprompt: System prompt for the endpoint.

        Returns:
            A stream of ``MessageUpdate``s whose value is the list of ``ToolResult``s.
        """
        return ReturningGenerator(self._run_tools(ctx, list(tools), preprompt))

    async def _run_tools(
        self, ctx: TextGenerationContext, tools: List[ToolDefinition], preprompt: Optional[str]
    ) -> AsyncGenerator[Union[MessageUpdate, Return[List[ToolResult]]], None]:
        messages = with_files_prompt(ctx.messages)

        pick_tool_start_time = time.monotonic()

        outputs = ctx.endpoint(
            messages=messages,
            preprompt=preprompt,
            generate_settings=ctx.assistant.generate_settings if ctx.assistant else None,
            tools=tools,
        )
        if inspect.isawaitable(outputs):
            outputs = await outputs

        extracted: List[Any] = []
        async for item in self.extractor.extract(outputs):
            if isinstance(item, Return):
                extracted = item.value
            else:
                yield item

        calls = self.normalizer.normalize_all(extracted, tools)

        self.metrics.tool.time_to_choose_tools.observe(
            {"model": ctx.conversation.model}, (time.monotonic() - pick_tool_start_time) * 1000
        )
        logger.info(
            "Model chose %d tool call(s) out of %d candidate(s) (available tools: %s).",
            len(calls),
            len(extracted),
            ", ".join(tool_names(tools)),
        )

        tool_context = ToolContext(
            conversation=ctx.conversation,
            messages=ctx.messages,
            preprompt=preprompt,
            assistant=ctx.assistant,
            ip=ctx.ip,
            username=ctx.username,
            web_search=ctx.web_search,
        )
        streams = [self.executor.call_tool(tool_context, tools, call) for call in calls]
        async for item in merge_async_generators(streams, buffer_size=self.settings.merge_buffer_size):
            yield item
