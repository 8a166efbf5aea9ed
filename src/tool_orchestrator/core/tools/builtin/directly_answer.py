"""The "answer directly" tool: lets the model say it does not need any tool."""

from ..models import ToolConfig, ToolDefinition


def directly_answer() -> None:
    """Answer the user directly without calling any tool."""
    return None


DIRECTLY_ANSWER_FUNCTION = ToolDefinition(
    name="directly_answer",
    display_name="Directly Answer",
    description=(
        "Calls a standard (un-augmented) AI chatbot to generate a response given the conversation history"
    ),
    func=directly_answer,
    is_no_op=True,
)

DIRECTLY_ANSWER = ToolConfig(
    id="directly_answer",
    display_name="Directly Answer",
    functions=[DIRECTLY_ANSWER_FUNCTION],
    is_locked=True,
    is_on_by_default=True,
)
