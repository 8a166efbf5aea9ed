import asyncio
from typing import Any, AsyncGenerator, List, Optional

import pytest

from tool_orchestrator.core.streams import Return, ReturningGenerator, merge_async_generators

from helpers import collect


async def delayed_source(
    name: str, delay: float, count: int = 2, value: Optional[str] = None
) -> AsyncGenerator[Any, None]:
    for idx in range(count):
        await asyncio.sleep(delay)
        yield f"{name}{idx}"
    yield Return(value)


@pytest.mark.asyncio
async def test_merge_yields_faster_source_first_and_keeps_per_source_order() -> None:
    merged = await collect(
        merge_async_generators([delayed_source("a", 0.05, value="A"), delayed_source("b", 0.01, value="B")])
    )

    items = merged[:-1]
    assert items.index("b0") < items.index("a0")
    assert items.index("b1") < items.index("a0")
    assert [item for item in items if item.startswith("a")] == ["a0", "a1"]
    assert [item for item in items if item.startswith("b")] == ["b0", "b1"]
    assert merged[-1] == Return(["A", "B"])


@pytest.mark.asyncio
async def test_merge_returns_values_in_submission_order_and_drops_none() -> None:
    sources = [
        delayed_source("slow", 0.04, count=1, value="first"),
        delayed_source("none", 0.0, count=1, value=None),
        delayed_source("fast", 0.01, count=1, value="third"),
    ]

    stream: ReturningGenerator[str, List[str]] = ReturningGenerator(merge_async_generators(sources))
    items = await collect(stream)

    assert sorted(items) == ["fast0", "none0", "slow0"]
    assert stream.value == ["first", "third"]


@pytest.mark.asyncio
async def test_merge_without_sources_returns_empty_list() -> None:
    assert await collect(merge_async_generators([])) == [Return([])]


@pytest.mark.asyncio
async def test_source_without_return_counts_as_none() -> None:
    async def plain() -> AsyncGenerator[str, None]:
        yield "x"

    assert await collect(merge_async_generators([plain(), delayed_source("y", 0, count=0, value="v")])) == [
        "x",
        Return(["v"]),
    ]


@pytest.mark.asyncio
async def test_closing_merged_stream_cancels_pending_sources() -> None:
    cancelled = asyncio.Event()

    async def never_ending() -> AsyncGenerator[str, None]:
        try:
            while True:
                await asyncio.sleep(10)
                yield "late"
        except asyncio.CancelledError:
            cancelled.set()
            raise

    merged = merge_async_generators([delayed_source("quick", 0, count=1), never_ending()])
    first = await merged.__anext__()
    assert first == "quick0"

    await asyncio.wait_for(merged.aclose(), timeout=1)
    assert cancelled.is_set()


@pytest.mark.asyncio
async def test_unread_events_are_bounded_by_buffer_size() -> None:
    produced = 0

    async def chatty() -> AsyncGenerator[int, None]:
        nonlocal produced
        for idx in range(50):
            produced += 1
            yield idx

    merged = merge_async_generators([chatty()], buffer_size=1)
    assert await merged.__anext__() == 0
    await asyncio.sleep(0.05)

    assert produced <= 3
    await merged.aclose()


@pytest.mark.asyncio
async def test_source_failure_propagates_and_cancels_siblings() -> None:
    sibling_cancelled = asyncio.Event()

    async def failing() -> AsyncGenerator[str, None]:
        yield "before"
        raise ValueError("boom")

    async def sibling() -> AsyncGenerator[str, None]:
        try:
            await asyncio.sleep(10)
            yield "never"
        except asyncio.CancelledError:
            sibling_cancelled.set()
            raise

    received: List[str] = []
    with pytest.raises(ValueError, match="boom"):
        async for item in merge_async_generators([failing(), sibling()]):
            received.append(item)

    assert received == ["before"]
    assert sibling_cancelled.is_set()


@pytest.mark.asyncio
async def test_returning_generator_value_requires_exhaustion() -> None:
    async def source() -> AsyncGenerator[Any, None]:
        yield 1
        yield Return("done")
        yield 2

    stream: ReturningGenerator[int, str] = ReturningGenerator(source())
    with pytest.raises(RuntimeError):
        _ = stream.value

    assert await collect(stream) == [1]
    assert stream.finished
    assert stream.value == "done"
