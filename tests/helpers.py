from typing import Any, AsyncIterator, Dict, List, Sequence

from tool_orchestrator.core import EndpointOutput, Token, ToolCall


class FakeEndpoint:
    """Replays canned outputs and records the arguments of every invocation."""

    def __init__(self, outputs: Sequence[EndpointOutput]) -> None:
        self.outputs = list(outputs)
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, **kwargs: Any) -> AsyncIterator[EndpointOutput]:
        self.calls.append(kwargs)
        return self._stream()

    async def _stream(self) -> AsyncIterator[EndpointOutput]:
        for output in self.outputs:
            yield output


def text_outputs(text: str) -> List[EndpointOutput]:
    """Stream ``text`` token by token the way text-generation endpoints do."""
    tokens = [EndpointOutput(token=Token(text=word)) for word in text.split(" ")]
    return [*tokens, EndpointOutput(token=Token(text="", special=True), generated_text=text)]


def native_outputs(*calls: ToolCall) -> List[EndpointOutput]:
    return [EndpointOutput(token=Token(text="", special=True, tool_calls=list(calls)), generated_text="")]


async def collect(stream: Any) -> List[Any]:
    return [item async for item in stream]
