import pytest

from tool_orchestrator.core import CallNormalizer, ExternalToolCall, ToolCall, ToolDefinition, ToolInput


async def _noop(**kwargs):
    return kwargs


@pytest.fixture
def tools() -> list:
    return [
        ToolDefinition(
            name="web_search",
            description="Search the web",
            func=_noop,
            aliases=("search",),
            inputs=[
                ToolInput(name="query", required=True),
                ToolInput(name="limit", required=False, default=5, type="int"),
            ],
        ),
        ToolDefinition(name="clock", description="Current time", func=_noop),
    ]


@pytest.fixture
def normalizer() -> CallNormalizer:
    return CallNormalizer()


def test_unknown_tool_is_rejected(normalizer, tools) -> None:
    assert normalizer.normalize(ExternalToolCall(tool_name="calculator", parameters={}), tools) is None


def test_missing_required_parameter_is_rejected(normalizer, tools) -> None:
    assert normalizer.normalize(ExternalToolCall(tool_name="web_search", parameters={"limit": 3}), tools) is None


def test_optional_parameter_gets_default(normalizer, tools) -> None:
    call = normalizer.normalize(ExternalToolCall(tool_name="web_search", parameters={"query": "x"}), tools)
    assert call == ToolCall(name="web_search", parameters={"query": "x", "limit": 5})


def test_null_optional_parameter_gets_default(normalizer, tools) -> None:
    call = normalizer.normalize(
        ExternalToolCall(tool_name="web_search", parameters={"query": "x", "limit": None}), tools
    )
    assert call is not None
    assert call.parameters["limit"] == 5


def test_present_values_are_copied_verbatim_and_extras_ignored(normalizer, tools) -> None:
    call = normalizer.normalize(
        ExternalToolCall(tool_name="web_search", parameters={"query": ["a", "b"], "limit": "7", "lang": "de"}), tools
    )
    assert call == ToolCall(name="web_search", parameters={"query": ["a", "b"], "limit": "7"})


@pytest.mark.parametrize("name", ["web-search", "search", "web_search"])
def test_aliases_and_separator_variants_resolve_to_canonical_name(normalizer, tools, name) -> None:
    call = normalizer.normalize(ExternalToolCall(tool_name=name, parameters={"query": "x"}), tools)
    assert call is not None
    assert call.name == "web_search"


def test_normalization_is_idempotent(normalizer, tools) -> None:
    external = ExternalToolCall(tool_name="web_search", parameters={"query": "x"})
    assert normalizer.normalize(external, tools) == normalizer.normalize(external, tools)


def test_normalize_all_filters_rejected_and_keeps_native_calls(normalizer, tools) -> None:
    native = ToolCall(name="anything", parameters={"raw": True})
    calls = normalizer.normalize_all(
        [
            ExternalToolCall(tool_name="unknown", parameters={}),
            native,
            ExternalToolCall(tool_name="clock", parameters={"tz": "UTC"}),
            ExternalToolCall(tool_name="web_search", parameters={}),
        ],
        tools,
    )
    assert calls == [native, ToolCall(name="clock", parameters={})]
