"""Text-generation endpoint backed by an OpenAI-compatible chat completions API."""

from typing import Any, AsyncGenerator, Dict, Iterable, List, Optional, Sequence, cast

from openai import AsyncOpenAI

from ...core.endpoint import EndpointOutput, Token
from ...core.messages.models import BaseMessage
from ...core.tools.models import ToolDefinition
from ...core.logger import get_logger
from .tool_call_accumulator import ToolCallAccumulator

logger = get_logger(__name__)

# Keys of assistant generation settings forwarded to the API
_FORWARDED_SETTINGS = ("temperature", "max_tokens", "top_p", "stop", "frequency_penalty", "presence_penalty")


class OpenAIEndpoint:
    """
    Streams chat completions and reports native tool calls.

    Content deltas are forwarded as they arrive; the final output carries the full
    generated text and the tool calls assembled from the streamed deltas.
    """

    def __init__(self, client: AsyncOpenAI, model_name: str, temp: float = 1.0, max_tokens: int = 3000):
        """
        Initializes the endpoint.

        Args:
            client: The initialized AsyncOpenAI client.
            model_name: The identifier of the model to use (e.g., 'gpt-4o-mini').
            temp: Default sampling temperature.
            max_tokens: Default maximum number of tokens to generate.
        """
        self.client = client
        self.model = model_name
        self.temperature = temp
        self.max_tokens = max_tokens

    async def __call__(
        self,
        *,
        messages: Sequence[BaseMessage],
        preprompt: Optional[str] = None,
        generate_settings: Optional[Dict[str, Any]] = None,
        tools: Sequence[ToolDefinition] = (),
    ) -> AsyncGenerator[EndpointOutput, None]:
        settings: Dict[str, Any] = {"temperature": self.temperature, "max_tokens": self.max_tokens}
        for key in _FORWARDED_SETTINGS:
            if generate_settings and generate_settings.get(key) is not None:
                settings[key] = generate_settings[key]

        request: Dict[str, Any] = {
            "model": self.model,
            "messages": cast(Iterable[Any], self._convert_history(messages, preprompt)),
            "stream": True,
            **settings,
        }
        openai_tools = self.build_tools(tools)
        if openai_tools:
            request["tools"] = openai_tools

        logger.debug("Requesting streamed completion from '%s' with %d tool(s).", self.model, len(openai_tools))
        stream = await self.client.chat.completions.create(**request)

        text_parts: List[str] = []
        accumulator = ToolCallAccumulator()
        async for chunk in stream:
            if not chunk.choices:
                continue
            delta = chunk.choices[0].delta

            if delta.content:
                text_parts.append(delta.content)
                yield EndpointOutput(token=Token(text=delta.content))

            for tool_call in delta.tool_calls or []:
                function = tool_call.function
                accumulator.add_delta(
                    tool_call.index,
                    name=function.name if function else None,
                    arguments=function.arguments if function else None,
                )

        tool_calls = accumulator.finalize()
        yield EndpointOutput(
            token=Token(text="", special=True, tool_calls=tool_calls or None),
            generated_text="".join(text_parts),
        )

    @staticmethod
    def build_tools(tools: Sequence[ToolDefinition]) -> List[Dict[str, Any]]:
        """Convert tool definitions to OpenAI function tools."""
        return [
            {
                "type": "function",
                "function": {
                    "name": tool.name,
                    "description": tool.description,
                    "parameters": tool.json_schema(),
                },
            }
            for tool in tools
        ]

    @staticmethod
    def _convert_history(messages: Sequence[BaseMessage], preprompt: Optional[str]) -> List[Dict[str, Any]]:
        """
        Converts generic messages to OpenAI message dictionaries.

        Args:
            messages: List of BaseMessage objects.
            preprompt: Optional system prompt placed first.

        Returns:
            List of OpenAI message dictionaries.
        """
        openai_history: List[Dict[str, Any]] = []
        if preprompt:
            openai_history.append({"role": "system", "content": preprompt})
        for msg in messages:
            if msg.author in ("user", "assistant", "system"):
                openai_history.append({"role": msg.author, "content": msg.content})
            else:
                logger.debug("Skipping message with unsupported author '%s'.", msg.author)
        return openai_history
