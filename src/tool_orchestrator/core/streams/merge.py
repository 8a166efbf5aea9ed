"""Fan-in of independent async event streams.

Python async generators cannot ``return`` a value, so streams in this package signal
their terminal value by yielding a :class:`Return` as their last item. The merger
collects those values per source while interleaving every other item by arrival.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, AsyncGenerator, AsyncIterator, Generic, List, Optional, Sequence, Tuple, TypeVar, Union

from ..logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")

_DONE = object()


@dataclass(frozen=True)
class Return(Generic[R]):
    """Terminal value of a stream. Always the last item a stream yields."""

    value: R


@dataclass(frozen=True)
class _SourceFailure:
    index: int
    error: BaseException


class ReturningGenerator(Generic[T, R]):
    """
    Iterate a :class:`Return`-terminated stream and keep its terminal value.

    Iterating yields every item except the final ``Return``; ``value`` holds the
    returned value once the stream is exhausted.
    """

    def __init__(self, source: AsyncGenerator[Union[T, Return[R]], None]) -> None:
        self._source = source
        self._value: Optional[R] = None
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def value(self) -> R:
        """The terminal value of the stream.

        Raises:
            RuntimeError: If the stream has not been consumed to its end.
        """
        if not self._finished:
            raise RuntimeError("Stream has not finished yet; iterate it to the end before reading its value.")
        return self._value  # type: ignore[return-value]

    def __aiter__(self) -> AsyncIterator[T]:
        return self._iterate()

    async def _iterate(self) -> AsyncGenerator[T, None]:
        try:
            async for item in self._source:
                if isinstance(item, Return):
                    self._value = item.value
                    self._finished = True
                    return
                yield item
            # Source ended without a Return
            self._finished = True
        finally:
            await self._source.aclose()

    async def aclose(self) -> None:
        await self._source.aclose()


async def _close(source: AsyncIterator[Any]) -> None:
    aclose = getattr(source, "aclose", None)
    if aclose is not None:
        await aclose()


async def merge_async_generators(
    sources: Sequence[AsyncIterator[Union[T, Return[R]]]],
    *,
    buffer_size: int = 32,
) -> AsyncGenerator[Union[T, Return[List[R]]], None]:
    """Merge several streams into one, yielding items as soon as any source produces them.

    Every source runs in its own task, so a slow source never holds back a fast one.
    Items of one source keep their relative order. Once all sources are exhausted a
    single ``Return`` is yielded carrying the terminal values of the sources in
    submission order, with ``None`` values left out.

    Sources push into a queue bounded by ``buffer_size``; a consumer that stops reading
    applies backpressure instead of letting unread events pile up. Closing the merged
    generator cancels every source that is still running.

    Args:
        sources: The streams to merge. Each may end with a ``Return`` item.
        buffer_size: Maximum number of produced but unread items.

    Returns:
        An async generator over the interleaved items followed by ``Return(values)``.

    Raises:
        Exception: The first exception raised by any source, after the remaining
            sources have been cancelled.
    """
    sources = list(sources)
    results: List[Optional[R]] = [None] * len(sources)
    queue: asyncio.Queue[Tuple[int, Any]] = asyncio.Queue(maxsize=buffer_size)

    async def drain(index: int, source: AsyncIterator[Union[T, Return[R]]]) -> None:
        try:
            async for item in source:
                if isinstance(item, Return):
                    results[index] = item.value
                    break
                await queue.put((index, item))
        except Exception as exc:
            await queue.put((index, _SourceFailure(index, exc)))
            return
        finally:
            await _close(source)
        await queue.put((index, _DONE))

    tasks = [asyncio.create_task(drain(idx, source), name=f"merge-source-{idx}") for idx, source in enumerate(sources)]
    remaining = len(tasks)
    try:
        while remaining:
            index, item = await queue.get()
            if item is _DONE:
                remaining -= 1
                continue
            if isinstance(item, _SourceFailure):
                logger.debug("Merged source %d failed: %r", item.index, item.error)
                raise item.error
            yield item

        yield Return([value for value in results if value is not None])
    finally:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            logger.debug("Cancelling %d unfinished merged source(s).", len(pending))
            await asyncio.gather(*pending, return_exceptions=True)
