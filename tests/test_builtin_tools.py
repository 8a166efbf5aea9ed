from typing import Any, Dict, List

import pytest

from tool_orchestrator.core import (
    DIRECTLY_ANSWER,
    WEBSEARCH,
    MetricsRegistry,
    Return,
    ToolCall,
    ToolContext,
    ToolErrorUpdate,
    ToolExecutor,
    ToolProgressUpdate,
    ToolResultStatus,
    WebSearchBackend,
)

from helpers import collect


class FakeSearch:
    def __init__(self) -> None:
        self.queries: List[str] = []

    async def search(self, query: str) -> List[Dict[str, Any]]:
        self.queries.append(query)
        return [{"title": "Quokka", "link": "https://example.com/quokka", "text": "A small marsupial."}]


def test_builtin_configs() -> None:
    assert DIRECTLY_ANSWER.is_locked and DIRECTLY_ANSWER.is_on_by_default
    assert DIRECTLY_ANSWER.functions[0].is_no_op
    assert DIRECTLY_ANSWER.functions[0].inputs == []
    assert not WEBSEARCH.is_locked
    assert WEBSEARCH.functions[0].has_name("web_search")
    assert isinstance(FakeSearch(), WebSearchBackend)


@pytest.mark.asyncio
async def test_websearch_uses_backend_from_context(conversation) -> None:
    backend = FakeSearch()
    context = ToolContext(conversation=conversation, web_search=backend)
    call = ToolCall(name="websearch", parameters={"query": "quokka"})

    items = await collect(ToolExecutor(MetricsRegistry()).call_tool(context, WEBSEARCH.functions, call))

    result = items[-1]
    assert isinstance(result, Return)
    assert result.value.status == ToolResultStatus.SUCCESS
    assert result.value.display is False
    assert result.value.outputs[0]["title"] == "Quokka"
    assert backend.queries == ["quokka"]
    assert [item.message for item in items if isinstance(item, ToolProgressUpdate)] == [
        "Searching the web for 'quokka'",
        "Found 1 result(s)",
    ]


@pytest.mark.asyncio
async def test_websearch_without_backend_fails(conversation) -> None:
    context = ToolContext(conversation=conversation)
    call = ToolCall(name="websearch", parameters={"query": "quokka"})

    items = await collect(ToolExecutor(MetricsRegistry()).call_tool(context, WEBSEARCH.functions, call))

    assert isinstance(items[-2], ToolErrorUpdate)
    assert items[-1].value.status == ToolResultStatus.ERROR
