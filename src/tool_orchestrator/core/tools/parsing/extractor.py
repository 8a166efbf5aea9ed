"""Extraction of tool calls from an endpoint's output stream.

Models either report tool calls natively, or write them as a JSON array inside a
```` ```json ```` fenced block of their generated text, e.g.::

    ```json
    [{"tool_name": "websearch", "parameters": {"query": "weather in Paris"}}]
    ```

The JSON models write frequently carries trailing commas, single quotes or unquoted
keys, so blocks are parsed as JSON5 in :func:`parse_tool_call_block`. Truncated or
ungrammatical blocks are still rejected.
"""

import json
import re
from typing import Any, AsyncGenerator, AsyncIterable, List, Tuple, Union

import json5

from ..models import ExternalToolCall, ToolCall, is_external_tool_call
from ...endpoint.models import EndpointOutput
from ...exceptions import ToolCallParseError
from ...messages.updates import StatusUpdate
from ...streams import Return
from ...logger import get_logger

logger = get_logger(__name__)

JSON_BLOCK_PATTERN = re.compile(r"```json\n(.*?)```", re.DOTALL)

ExtractedCall = Union[ExternalToolCall, ToolCall]


def parse_tool_call_block(block: str) -> List[Any]:
    """Parse the body of a JSON fenced block into a list.

    Strict JSON is tried first, then JSON5, which accepts trailing commas, single quotes
    and unquoted keys. Nothing is ever completed or filled in.

    Args:
        block: The text between the fences.

    Returns:
        The parsed array.

    Raises:
        ToolCallParseError: If the block is empty, cannot be parsed, or is not an array.
    """
    block = block.strip()
    if block.endswith(","):
        block = block[:-1].rstrip()
    if not block:
        raise ToolCallParseError("Tool call block is empty.")

    try:
        parsed = json.loads(block)
    except json.JSONDecodeError:
        try:
            parsed = json5.loads(block)
        except ValueError as exc:
            raise ToolCallParseError(f"Could not parse tool call block: {exc}") from exc

    if not isinstance(parsed, list):
        raise ToolCallParseError(f"Tool call block must be a JSON array, got {type(parsed).__name__}.")
    return parsed


class CallExtractor:
    """
    Collects the tool calls a model requested while its output streams in.

    A malformed block is reported as a status update and skipped; it never stops the
    extraction of other blocks or of the rest of the stream.
    """

    def __init__(self, parse_error_message: str = "Error while parsing tool calls, please retry") -> None:
        self.parse_error_message = parse_error_message

    @staticmethod
    def extract_from_text(text: str) -> Tuple[List[ExternalToolCall], List[ToolCallParseError]]:
        """Find and parse every JSON fenced block in ``text``.

        Args:
            text: Generated text.

        Returns:
            The calls found, and one error per block that could not be parsed.
        """
        calls: List[ExternalToolCall] = []
        errors: List[ToolCallParseError] = []
        for match in JSON_BLOCK_PATTERN.finditer(text):
            try:
                parsed = parse_tool_call_block(match.group(1))
            except ToolCallParseError as exc:
                logger.error("Failed to parse tool call: %s", exc)
                errors.append(exc)
                continue
            calls.extend(ExternalToolCall.model_validate(item) for item in parsed if is_external_tool_call(item))
        return calls, errors

    async def extract(
        self, outputs: AsyncIterable[EndpointOutput]
    ) -> AsyncGenerator[Union[StatusUpdate, Return[List[ExtractedCall]]], None]:
        """Consume an endpoint stream and collect the requested calls.

        Args:
            outputs: The endpoint's output stream.

        Returns:
            An async generator yielding a ``StatusUpdate`` per malformed block, then
            ``Return`` with native ``ToolCall``s and parsed ``ExternalToolCall``s in the
            order they were found.
        """
        calls: List[ExtractedCall] = []
        async for output in outputs:
            # model natively supports tool calls
            if output.token.tool_calls:
                calls.extend(output.token.tool_calls)
                continue

            if not output.generated_text:
                continue

            found, errors = self.extract_from_text(output.generated_text)
            calls.extend(found)
            for _ in errors:
                yield StatusUpdate(status="error", message=self.parse_error_message)

        logger.debug("Extracted %d tool call candidate(s).", len(calls))
        yield Return(calls)
