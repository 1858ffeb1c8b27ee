"""Pytest configuration and fixtures."""

import os
from collections.abc import Sequence
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from llm_labs.console import ConsoleReporter
from llm_labs.providers.base import (
    AssistantTurn,
    BaseLLMProvider,
    ChatTurn,
    CompletionResponse,
    ToolCallRequest,
    ToolDefinition,
    UsageStats,
)


@pytest.fixture(autouse=True)
def mock_env() -> Any:
    """Isolate every test from the developer's environment and .env file."""
    from llm_labs.core.config import get_settings

    get_settings.cache_clear()
    with patch.dict(os.environ, {"LOG_DELAY_MS": "0"}):
        for name in ("OPENAI_API_KEY", "OPENAI_MODEL"):
            os.environ.pop(name, None)
        yield
    get_settings.cache_clear()


class FakeProvider(BaseLLMProvider):
    """Provider that replays scripted assistant turns and records every call."""

    provider_name = "fake"

    def __init__(self, turns: Sequence[AssistantTurn], usage: UsageStats | None = None) -> None:
        self.default_model = "fake-model"
        self._turns = list(turns)
        self.usage = usage
        self.calls: list[dict[str, Any]] = []

    def complete(
        self,
        messages: Sequence[ChatTurn],
        model: str | None = None,
        tools: list[ToolDefinition] | None = None,
        **kwargs: Any,
    ) -> CompletionResponse:
        self.calls.append({"messages": list(messages), "model": model, "tools": tools, **kwargs})
        if not self._turns:
            raise AssertionError("FakeProvider ran out of scripted turns")
        return CompletionResponse(turn=self._turns.pop(0), model=model or self.default_model, usage=self.usage)


@pytest.fixture
def fake_provider_factory() -> Any:
    """Build a FakeProvider from a list of assistant turns."""
    return FakeProvider


@pytest.fixture
def reporter() -> ConsoleReporter:
    """Reporter that prints without pausing."""
    return ConsoleReporter(delay_ms=0)


@pytest.fixture
def chipotle_tool_call() -> ToolCallRequest:
    return ToolCallRequest(id="call_1", function_name="get_restaurant_stats", raw_arguments='{"chain": "Chipotle"}')


@pytest.fixture
def mock_openai_client() -> MagicMock:
    """Create a mock OpenAI client."""
    mock_client = MagicMock()

    mock_response = MagicMock()
    mock_response.choices = [MagicMock()]
    mock_response.choices[0].message.content = "Mock response"
    mock_response.choices[0].message.tool_calls = None
    mock_response.choices[0].finish_reason = "stop"
    mock_response.usage.prompt_tokens = 10
    mock_response.usage.completion_tokens = 20
    mock_response.usage.total_tokens = 30
    mock_response.model = "gpt-5-mini"

    mock_client.chat.completions.create.return_value = mock_response

    return mock_client
