import pytest
from typing import Annotated, Optional
from pydantic import Field

from tool_orchestrator.core import (
    DIRECTLY_ANSWER,
    WEBSEARCH,
    ToolConfig,
    ToolDefinition,
    ToolInput,
    ToolNotFoundError,
    ToolRegistrationError,
    ToolRegistry,
    ToolValidationError,
)
from tool_orchestrator.core.tools.registry import tool_names


async def _noop(**kwargs):
    return kwargs


def _config(tool_id: str, is_locked: bool = False, is_on_by_default: bool = True) -> ToolConfig:
    return ToolConfig(
        id=tool_id,
        functions=[ToolDefinition(name=tool_id, description=f"{tool_id} tool", func=_noop)],
        is_locked=is_locked,
        is_on_by_default=is_on_by_default,
    )


def test_registry_tool_decorator() -> None:
    registry = ToolRegistry(include_builtin=False)

    @registry.tool
    def my_tool(
        x: Annotated[int, Field(description="An integer")],
        factor: Annotated[Optional[float], Field(description="Multiplier")] = 2.0,
    ) -> float:
        """My tool description."""
        return x * (factor or 1)

    assert "my_tool" in registry.tools
    tool_def = registry.tools["my_tool"].functions[0]
    assert tool_def.description == "My tool description."
    assert tool_def.inputs == [
        ToolInput(name="x", description="An integer", required=True, type="int"),
        ToolInput(name="factor", description="Multiplier", required=False, default=2.0, type="float"),
    ]
    assert tool_def.func(2) == 4


def test_registry_decorator_with_options() -> None:
    registry = ToolRegistry(include_builtin=False)

    @registry.tool(aliases=("fetch",), display_name="Fetch URL", is_on_by_default=False)
    async def fetch_url(url: Annotated[str, Field(description="Page to fetch")], context=None) -> str:
        """Fetch a web page."""
        return url

    config = registry.tools["fetch_url"]
    assert config.display_name == "Fetch URL"
    assert config.is_on_by_default is False
    assert config.functions[0].aliases == ("fetch",)
    # The context parameter is injected, never exposed to the model
    assert [tool_input.name for tool_input in config.functions[0].inputs] == ["url"]


def test_registry_missing_docstring() -> None:
    registry = ToolRegistry(include_builtin=False)
    with pytest.raises(ToolValidationError, match="missing docstring"):

        @registry.tool
        def no_doc_tool(x: Annotated[int, Field(description="desc")]) -> None:
            pass


def test_registry_missing_parameter_description() -> None:
    registry = ToolRegistry(include_builtin=False)
    with pytest.raises(ToolValidationError, match="missing a description"):

        @registry.tool
        def bad_tool(x: int) -> None:
            """Has a docstring."""


def test_register_from_parts() -> None:
    registry = ToolRegistry(include_builtin=False)
    inputs = [ToolInput(name="query")]

    config = registry.register("lookup", "Look something up", _noop, inputs)

    assert config.id == "lookup"
    assert config.functions[0].inputs == inputs


def test_register_string_without_func_fails() -> None:
    registry = ToolRegistry(include_builtin=False)
    with pytest.raises(ToolRegistrationError):
        registry.register("lookup")


def test_duplicate_registration_fails() -> None:
    registry = ToolRegistry(include_builtin=False)
    registry.register(_config("calc"))

    with pytest.raises(ToolRegistrationError, match="already registered"):
        registry.register(_config("calc"))


def test_unregister() -> None:
    registry = ToolRegistry(include_builtin=False)
    registry.register(_config("calc"))

    registry.unregister("calc")

    assert "calc" not in registry.tools
    with pytest.raises(ToolNotFoundError):
        registry.unregister("calc")


def test_builtin_tools_are_registered_by_default(registry) -> None:
    assert list(registry.tools) == [DIRECTLY_ANSWER.id, WEBSEARCH.id]
    assert tool_names(registry.functions) == ("directly_answer", "websearch")


def test_assistant_gets_directly_answer_and_websearch_only(registry) -> None:
    registry.register(_config("calc", is_locked=True))

    for preferences in (None, {}, {"websearch": False, "calc": True}):
        selected = registry.select_tools(preferences, is_assistant=True)
        assert tool_names(selected) == ("directly_answer", "websearch")


def test_locked_default_on_tool_ignores_preferences(registry) -> None:
    registry.register(_config("calc", is_locked=True))

    selected = registry.select_tools({"calc": False}, is_assistant=False)

    assert "calc" in tool_names(selected)


def test_preferences_override_defaults(registry) -> None:
    registry.register(_config("calc"))
    registry.register(_config("images", is_on_by_default=False))
    registry.register(_config("weather", is_on_by_default=False))

    selected = registry.select_tools({"calc": False, "images": True}, is_assistant=False)

    assert tool_names(selected) == ("directly_answer", "websearch", "images")


def test_missing_preferences_fall_back_to_defaults(registry) -> None:
    registry.register(_config("images", is_on_by_default=False))

    assert tool_names(registry.select_tools(None, is_assistant=False)) == ("directly_answer", "websearch")


def test_locked_default_off_tool_follows_preferences(registry) -> None:
    registry.register(_config("admin", is_locked=True, is_on_by_default=False))

    assert "admin" not in tool_names(registry.select_tools({}, is_assistant=False))
    assert "admin" in tool_names(registry.select_tools({"admin": True}, is_assistant=False))


def test_json_schema() -> None:
    tool = ToolDefinition(
        name="search",
        description="Search",
        func=_noop,
        inputs=[
            ToolInput(name="query", description="What to look for"),
            ToolInput(name="limit", required=False, default=5, type="int"),
        ],
    )

    assert tool.json_schema() == {
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "What to look for"},
            "limit": {"type": "integer", "default": 5},
        },
        "required": ["query"],
    }


def test_optional_inputs_report_their_inner_type() -> None:
    registry = ToolRegistry(include_builtin=False)

    @registry.tool
    def paginate(
        page: Annotated[int | None, Field(description="Page number")] = None,
        size: Annotated[Optional[int], Field(description="Page size")] = None,
    ) -> None:
        """Paginate results."""

    tool_def = registry.tools["paginate"].functions[0]
    assert [(tool_input.name, tool_input.type) for tool_input in tool_def.inputs] == [("page", "int"), ("size", "int")]
    assert tool_def.json_schema()["properties"] == {
        "page": {"type": "integer", "description": "Page number"},
        "size": {"type": "integer", "description": "Page size"},
    }
