"""Tool registry and per-turn tool selection."""

import inspect
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ..models import ToolConfig, ToolDefinition, ToolInput
from ..schema import ToolInputFactory
from ..builtin import DIRECTLY_ANSWER, WEBSEARCH
from ...exceptions import ToolNotFoundError, ToolRegistrationError, ToolValidationError
from ...logger import get_logger

logger = get_logger(__name__)

# Parameters of tool functions that are never exposed to the model.
_RESERVED_PARAMETERS = ("self", "context")


class ToolRegistry:
    """
    A central registry to manage and access all configured tools.

    Tools are stored as ``ToolConfig`` entries keyed by id, in registration order. The
    registry is populated at startup and only read while turns are running.
    """

    def __init__(
        self,
        no_op_tool: ToolConfig = DIRECTLY_ANSWER,
        websearch_tool: ToolConfig = WEBSEARCH,
        include_builtin: bool = True,
    ) -> None:
        """Initialize the ToolRegistry.

        Args:
            no_op_tool: The "answer directly" tool offered to assistants.
            websearch_tool: The web search tool offered to assistants.
            include_builtin: Register both tools above as regular configured tools as well.
        """
        self.tools: Dict[str, ToolConfig] = {}
        self.no_op_tool = no_op_tool
        self.websearch_tool = websearch_tool
        if include_builtin:
            self.register(no_op_tool)
            self.register(websearch_tool)

    def register(
        self,
        name_or_tool: Union[str, ToolConfig, ToolDefinition, Callable],
        description: Optional[str] = None,
        func: Optional[Callable] = None,
        inputs: Optional[Sequence[ToolInput]] = None,
        *,
        aliases: Sequence[str] = (),
        display_name: Optional[str] = None,
        is_locked: bool = False,
        is_on_by_default: bool = True,
    ) -> ToolConfig:
        """
        Register a new tool.

        A tool can be registered as a complete ``ToolConfig``, as a single ``ToolDefinition``,
        as a plain callable (the definition is generated from its signature and docstring),
        or from its individual parts (name, description, function, inputs).

        Args:
            name_or_tool: A ``ToolConfig``, a ``ToolDefinition``, the tool name (str) or a Callable.
            description: What the tool does. Required if `name_or_tool` is a string and inputs are provided.
            func: The callable implementing the tool. Required if `name_or_tool` is a string.
            inputs: Declared inputs. If None, they are inferred from `func`.
            aliases: Alternative names for generated definitions.
            display_name: Human-readable name for generated configs.
            is_locked: Lock flag for generated configs.
            is_on_by_default: Default-on flag for generated configs.

        Returns:
            The registered ``ToolConfig``.

        Raises:
            ToolRegistrationError: If arguments are missing or the tool id already exists.
        """

        if isinstance(name_or_tool, ToolConfig):
            config = name_or_tool
        else:
            if isinstance(name_or_tool, ToolDefinition):
                tool = name_or_tool
            elif callable(name_or_tool):
                tool = self._generate_tool_definition(
                    name_or_tool, description=description, aliases=aliases, display_name=display_name
                )
            else:
                # name_or_tool is a string (name)
                if func is None:
                    raise ToolRegistrationError("If passing name as string, func is required.")

                if inputs is None:
                    tool = self._generate_tool_definition(
                        func, name=name_or_tool, description=description, aliases=aliases, display_name=display_name
                    )
                else:
                    if description is None:
                        raise ToolRegistrationError("If passing name and inputs, description is required.")
                    tool = ToolDefinition(
                        name=name_or_tool,
                        description=description,
                        func=func,
                        inputs=list(inputs),
                        aliases=tuple(aliases),
                        display_name=display_name,
                    )

            config = ToolConfig(
                id=tool.name,
                functions=[tool],
                display_name=tool.display_name,
                is_locked=is_locked,
                is_on_by_default=is_on_by_default,
            )

        if config.id in self.tools:
            msg = f"Tool '{config.id}' is already registered."
            logger.error(msg)
            raise ToolRegistrationError(msg)

        self.tools[config.id] = config
        logger.info(f"Successfully registered tool: '{config.id}'")
        return config

    def unregister(self, tool_id: str) -> None:
        """Unregister a tool from the registry.

        Args:
            tool_id: The id of the tool to remove.

        Raises:
            ToolNotFoundError: If the tool does not exist in the registry.
        """
        if tool_id in self.tools:
            del self.tools[tool_id]
            logger.info(f"Successfully unregistered tool: '{tool_id}'")
        else:
            raise ToolNotFoundError(f"Tool '{tool_id}' not found in the registry.")

    def tool(self, func: Optional[Callable] = None, **options: Any) -> Callable:
        """A decorator to turn a function into a tool.

        Usable bare (``@registry.tool``) or with registration options
        (``@registry.tool(aliases=("search",), is_on_by_default=False)``).

        Returns:
            The original function, after registering it as a tool.
        """
        if func is None:

            def decorator(inner: Callable) -> Callable:
                self.register(inner, **options)
                return inner

            return decorator

        self.register(func)
        return func

    @property
    def functions(self) -> List[ToolDefinition]:
        """All registered tool functions, flattened in registration order."""
        return [function for config in self.tools.values() for function in config.functions]

    def select_tools(self, preferences: Optional[Mapping[str, bool]], is_assistant: bool) -> List[ToolDefinition]:
        """Select the tool functions available for one turn.

        Assistants only get the "answer directly" and web search tools. Otherwise a tool is
        included when it is locked and on by default, or when the user's preference for its
        id says so, falling back to the tool's own default when there is no preference.

        Args:
            preferences: Mapping of tool id to enabled flag.
            is_assistant: Whether the conversation runs with an assistant.

        Returns:
            The eligible tool functions in order.
        """
        if is_assistant:
            return [*self.no_op_tool.functions, *self.websearch_tool.functions]

        preferences = preferences or {}
        logger.info("Selecting tools with preferences: %s", dict(preferences))

        selected: List[ToolDefinition] = []
        for config in self.tools.values():
            if config.is_locked and config.is_on_by_default:
                enabled = True
            else:
                preference = preferences.get(config.id)
                enabled = config.is_on_by_default if preference is None else bool(preference)
            if enabled:
                selected.extend(config.functions)
        return selected

    def _generate_tool_definition(
        self,
        func: Callable,
        name: Optional[str] = None,
        description: Optional[str] = None,
        aliases: Sequence[str] = (),
        display_name: Optional[str] = None,
    ) -> ToolDefinition:
        """Generate a ToolDefinition from a callable function.

        Args:
            func: The function to generate a definition for.
            name: Optional name override for the tool.
            description: Optional description override for the tool.
            aliases: Alternative names.
            display_name: Human-readable name.

        Returns:
            A ToolDefinition with one ToolInput per parameter.

        Raises:
            ToolValidationError: If the function is missing a docstring or parameter descriptions.
        """

        tool_name = name or func.__name__
        if description is None:
            description = self._get_docstring_from_func(func, tool_name)

        signature = inspect.signature(func)
        inputs = self._build_inputs(signature, tool_name)

        return ToolDefinition(
            name=tool_name,
            description=description,
            func=func,
            inputs=inputs,
            aliases=tuple(aliases),
            display_name=display_name,
        )

    @staticmethod
    def _get_docstring_from_func(func: Callable, tool_name: str) -> str:
        doc = inspect.getdoc(func)
        if not doc:
            msg = f"Tool '{tool_name}' missing docstring. LLMs need a description of what the tool does."
            logger.error(msg)
            raise ToolValidationError(msg)
        return doc

    @staticmethod
    def _build_inputs(signature: inspect.Signature, tool_name: str) -> List[ToolInput]:

        inputs: List[ToolInput] = []
        for param_name, param in signature.parameters.items():
            if param_name in _RESERVED_PARAMETERS:
                continue
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            inputs.append(ToolInputFactory.build_tool_input(param_name=param_name, param=param, tool_name=tool_name))
        return inputs


def tool_names(tools: Sequence[ToolDefinition]) -> Tuple[str, ...]:
    return tuple(tool.name for tool in tools)
