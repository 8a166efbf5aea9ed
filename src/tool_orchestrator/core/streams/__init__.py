"""Stream utilities: terminal values and concurrent fan-in."""

from .merge import Return, ReturningGenerator, merge_async_generators

__all__ = ["Return", "ReturningGenerator", "merge_async_generators"]
