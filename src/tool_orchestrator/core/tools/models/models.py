"""Tool descriptors owned by the registry."""

from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

_JSON_TYPES = {
    "str": "string",
    "int": "integer",
    "float": "number",
    "bool": "boolean",
    "list": "array",
    "dict": "object",
}


def _normalize_name(name: str) -> str:
    # Models frequently swap '-' and '_' in tool names.
    return name.replace("-", "_")


class ToolInput(BaseModel):
    """
    A declared input of a tool function.

    Attributes:
        name: Parameter name as the model has to spell it.
        description: What the parameter means, shown to the model.
        required: Whether a call without this parameter is rejected.
        default: Value used when an optional parameter is absent. Ignored for required inputs.
        type: Type hint of the value (``"str"``, ``"int"``, ...).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    required: bool = True
    default: Any = None
    type: str = "str"


class ToolOutput(BaseModel):
    """Terminal payload produced by a tool function."""

    outputs: List[Dict[str, Any]] = Field(default_factory=list)
    display: bool = True

    @classmethod
    def from_value(cls, value: Any, tool_name: str) -> "ToolOutput":
        """Wrap whatever a tool function returned into a ``ToolOutput``."""
        if isinstance(value, ToolOutput):
            return value
        if value is None:
            return cls()
        if isinstance(value, dict):
            return cls(outputs=[value])
        if isinstance(value, (list, tuple)) and all(isinstance(item, dict) for item in value):
            return cls(outputs=list(value))
        return cls(outputs=[{tool_name: value}])


class ToolDefinition(BaseModel):
    """
    Represents one callable tool function that can be offered to an LLM.

    Attributes:
        name: The unique name of the tool.
        description: A brief description of what the tool does.
        func: Implementation. May be an async generator function (progress updates followed
            by the output), a coroutine function or a plain function. A parameter called
            ``context`` receives the tool context.
        inputs: Declared inputs in declaration order.
        aliases: Alternative names the model may use.
        display_name: Human-readable name for UIs.
        is_no_op: Marks the "answer directly" tool: calling it means the model chose not
            to use a tool, so nothing is executed or reported.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str
    func: Callable[..., Any]
    inputs: List[ToolInput] = Field(default_factory=list)
    aliases: Tuple[str, ...] = ()
    display_name: Optional[str] = None
    is_no_op: bool = False

    def has_name(self, name: str) -> bool:
        """Check whether ``name`` refers to this tool, by name or alias."""
        candidates = (self.name, *self.aliases)
        if name in candidates:
            return True
        normalized = _normalize_name(name)
        return any(_normalize_name(candidate) == normalized for candidate in candidates)

    def json_schema(self) -> Dict[str, Any]:
        """Render the inputs as a JSON schema object for native tool calling."""
        properties: Dict[str, Any] = {}
        required: List[str] = []
        for tool_input in self.inputs:
            prop: Dict[str, Any] = {"type": _JSON_TYPES.get(tool_input.type, "string")}
            if tool_input.description:
                prop["description"] = tool_input.description
            if tool_input.required:
                required.append(tool_input.name)
            elif tool_input.default is not None:
                prop["default"] = tool_input.default
            properties[tool_input.name] = prop
        return {"type": "object", "properties": properties, "required": required}


class ToolConfig(BaseModel):
    """
    A configured tool as users see it: one or more functions behind a single preference toggle.

    Attributes:
        id: Stable identifier used as the key of user tool preferences.
        functions: The functions this tool contributes when enabled.
        display_name: Human-readable name.
        is_locked: Locked tools cannot be switched off by preferences when on by default.
        is_on_by_default: Whether the tool is enabled when the user has no preference.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    functions: List[ToolDefinition]
    display_name: Optional[str] = None
    is_locked: bool = False
    is_on_by_default: bool = True


def find_tool(name: str, tools: List[ToolDefinition]) -> Optional[ToolDefinition]:
    """Return the first tool answering to ``name``, or None."""
    return next((tool for tool in tools if tool.has_name(name)), None)
