import inspect
import types
from typing import Any, Annotated, Union, get_args, get_origin

from pydantic.fields import FieldInfo

from ...exceptions.exceptions import ToolValidationError
from ..models import ToolInput
from ...logger import get_logger

logger = get_logger(__name__)


class ToolInputFactory:
    """Capsules the extraction and validation of single function parameters into ToolInputs."""

    @classmethod
    def build_tool_input(cls, param_name: str, param: inspect.Parameter, tool_name: str) -> ToolInput:
        """Creates the ToolInput for a single function parameter.

        A parameter without a default is required; otherwise its default becomes the
        input's default.

        Args:
            param_name: The name of the parameter.
            param: The inspect.Parameter object.
            tool_name: The name of the tool for error reporting.

        Returns:
            The declared input.
        """

        annotation = param.annotation
        description = cls._extract_description(annotation=annotation, param_name=param_name, tool_name=tool_name)
        required = param.default is inspect.Parameter.empty

        return ToolInput(
            name=param_name,
            description=description,
            required=required,
            default=None if required else param.default,
            type=cls._type_hint(annotation),
        )

    @staticmethod
    def _type_hint(annotation: Any) -> str:
        if get_origin(annotation) is Annotated:
            annotation = get_args(annotation)[0]
        origin = get_origin(annotation)
        if origin in (Union, types.UnionType):
            # Optional[X] -> X
            args = [arg for arg in get_args(annotation) if arg is not type(None)]
            if len(args) == 1:
                annotation = args[0]
                origin = get_origin(annotation)
        if origin is not None:
            annotation = origin
        return getattr(annotation, "__name__", str(annotation))

    @staticmethod
    def _extract_description(annotation: Any, param_name: str, tool_name: str) -> str:
        """Every tool parameter needs 'Annotated[<class>, Field(description='...')] = ...' as its annotation.

        Args:
            annotation: The type annotation to inspect.
            param_name: The name of the parameter being checked.
            tool_name: The name of the tool for error reporting.

        Raises:
            ToolValidationError: If the parameter is missing a Pydantic Field description.
        """

        if get_origin(annotation) is Annotated:
            for metadata in get_args(annotation):
                if isinstance(metadata, FieldInfo) and metadata.description:
                    return metadata.description

        msg = (
            f"Parameter '{param_name}' in tool '{tool_name}' is missing a description.\n"
            f"Usage: {param_name}: Annotated[Type, Field(description='...')] = ..."
        )
        logger.error(msg)
        raise ToolValidationError(msg)
