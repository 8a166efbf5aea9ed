import pytest

from tool_orchestrator.core import Conversation, MetricsRegistry, ToolRegistry


@pytest.fixture
def registry() -> ToolRegistry:
    return ToolRegistry()


@pytest.fixture
def metrics() -> MetricsRegistry:
    return MetricsRegistry()


@pytest.fixture
def conversation() -> Conversation:
    return Conversation(id="conv-1", model="test-model")
