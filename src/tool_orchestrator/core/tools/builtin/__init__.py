"""Tools that are always known to the registry."""

from .directly_answer import DIRECTLY_ANSWER, DIRECTLY_ANSWER_FUNCTION
from .websearch import WEBSEARCH, WEBSEARCH_FUNCTION, WebSearchBackend

__all__ = ["DIRECTLY_ANSWER", "DIRECTLY_ANSWER_FUNCTION", "WEBSEARCH", "WEBSEARCH_FUNCTION", "WebSearchBackend"]
