"""Web search tool. The search itself is delegated to a backend supplied by the host."""

from typing import Any, AsyncGenerator, Dict, List, Optional, Protocol, Union, runtime_checkable

from ..models import ToolConfig, ToolDefinition, ToolInput, ToolOutput
from ...exceptions import ToolExecutionError
from ...messages.updates import ToolProgressUpdate
from ...logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class WebSearchBackend(Protocol):
    """Search engine adapter provided by the host application."""

    async def search(self, query: str) -> List[Dict[str, Any]]:
        """Return result entries such as ``{"title": ..., "link": ..., "text": ...}``."""
        ...


async def websearch(query: str, context: Any) -> AsyncGenerator[Union[ToolProgressUpdate, ToolOutput], None]:
    """Search the web and return the matching pages."""
    backend: Optional[WebSearchBackend] = getattr(context, "web_search", None)
    if backend is None:
        raise ToolExecutionError("No web search backend is configured.")

    yield ToolProgressUpdate(message=f"Searching the web for '{query}'")
    results = await backend.search(query)
    logger.info("Web search for '%s' returned %d result(s).", query, len(results))
    yield ToolProgressUpdate(message=f"Found {len(results)} result(s)")
    yield ToolOutput(outputs=results, display=False)


WEBSEARCH_FUNCTION = ToolDefinition(
    name="websearch",
    display_name="Web Search",
    description="Use this tool to search web pages for answers that will help answer the user's query.",
    func=websearch,
    inputs=[
        ToolInput(
            name="query",
            description=(
                "A search query which will be used to fetch the most relevant snippets regarding the user's query"
            ),
            required=True,
            type="str",
        )
    ],
    aliases=("web_search",),
)

WEBSEARCH = ToolConfig(
    id="websearch",
    display_name="Web Search",
    functions=[WEBSEARCH_FUNCTION],
    is_locked=False,
    is_on_by_default=True,
)
