"""Tests for the OpenAI provider."""

import os
from typing import Any
from unittest.mock import MagicMock, patch

import httpx
import pytest
from openai import APIConnectionError, AuthenticationError as OpenAIAuthenticationError

from llm_labs.core.errors import AuthenticationError, ConfigurationError, ProviderError, ValidationError
from llm_labs.providers import OpenAIProvider, get_provider
from llm_labs.providers.base import AssistantTurn, SystemTurn, ToolCallRequest, ToolTurn, UserTurn
from llm_labs.tools import GET_RESTAURANT_STATS_TOOL


def _thread() -> list[Any]:
    return [SystemTurn("sys"), UserTurn("hi")]


class TestConstruction:
    """Tests for provider construction."""

    def test_missing_key_fails_before_client_creation(self) -> None:
        with patch("llm_labs.providers.openai_provider.OpenAI") as client_cls:
            with pytest.raises(ConfigurationError):
                OpenAIProvider()
            client_cls.assert_not_called()

    def test_key_from_env(self) -> None:
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-test"}):
            with patch("llm_labs.providers.openai_provider.OpenAI") as client_cls:
                provider = OpenAIProvider()

        client_cls.assert_called_once_with(api_key="sk-test")
        assert provider.default_model == "gpt-5-mini"

    def test_model_override_from_env(self, mock_openai_client: MagicMock) -> None:
        with patch.dict(os.environ, {"OPENAI_MODEL": "gpt-4o-mini"}):
            provider = OpenAIProvider(client=mock_openai_client)

        assert provider.default_model == "gpt-4o-mini"

    def test_get_provider_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown provider"):
            get_provider("anthropic")


class TestComplete:
    """Tests for OpenAIProvider.complete."""

    def test_plain_completion(self, mock_openai_client: MagicMock) -> None:
        provider = OpenAIProvider(client=mock_openai_client)

        response = provider.complete(_thread())

        assert response.turn == AssistantTurn(content="Mock response")
        assert response.content == "Mock response"
        assert response.tool_calls == ()
        assert response.usage is not None
        assert response.usage.prompt_tokens == 10
        assert response.usage.total_tokens == 30
        kwargs = mock_openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-5-mini"
        assert kwargs["messages"] == [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "hi"},
        ]
        assert "tools" not in kwargs

    def test_tools_and_sampling_params(self, mock_openai_client: MagicMock) -> None:
        provider = OpenAIProvider(client=mock_openai_client)

        provider.complete(
            _thread(),
            model="gpt-4o-mini",
            tools=[GET_RESTAURANT_STATS_TOOL],
            temperature=0.2,
            seed=None,
        )

        kwargs = mock_openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["tools"] == [GET_RESTAURANT_STATS_TOOL.to_openai_format()]
        assert kwargs["temperature"] == 0.2
        assert "seed" not in kwargs

    def test_tool_calls_converted(self, mock_openai_client: MagicMock) -> None:
        tool_call = MagicMock()
        tool_call.id = "call_1"
        tool_call.type = "function"
        tool_call.function.name = "get_restaurant_stats"
        tool_call.function.arguments = '{"chain": "Chipotle"}'
        message = mock_openai_client.chat.completions.create.return_value.choices[0].message
        message.content = None
        message.tool_calls = [tool_call]

        response = OpenAIProvider(client=mock_openai_client).complete(_thread())

        assert response.content is None
        assert response.tool_calls == (
            ToolCallRequest(id="call_1", function_name="get_restaurant_stats", raw_arguments='{"chain": "Chipotle"}'),
        )

    def test_tool_round_trip_messages(self, mock_openai_client: MagicMock) -> None:
        call = ToolCallRequest(id="call_1", function_name="get_restaurant_stats", raw_arguments="{}")
        thread = [*_thread(), AssistantTurn(tool_calls=(call,)), ToolTurn("null", tool_call_id="call_1")]

        OpenAIProvider(client=mock_openai_client).complete(thread)

        messages = mock_openai_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages[2]["tool_calls"][0]["id"] == "call_1"
        assert messages[3] == {"role": "tool", "content": "null", "tool_call_id": "call_1"}

    def test_missing_usage(self, mock_openai_client: MagicMock) -> None:
        mock_openai_client.chat.completions.create.return_value.usage = None

        response = OpenAIProvider(client=mock_openai_client).complete(_thread())

        assert response.usage is None

    def test_empty_thread_rejected(self, mock_openai_client: MagicMock) -> None:
        with pytest.raises(ValidationError):
            OpenAIProvider(client=mock_openai_client).complete([])
        mock_openai_client.chat.completions.create.assert_not_called()

    def test_no_choices(self, mock_openai_client: MagicMock) -> None:
        mock_openai_client.chat.completions.create.return_value.choices = []

        with pytest.raises(ProviderError):
            OpenAIProvider(client=mock_openai_client).complete(_thread())


class TestErrors:
    """Provider failures are wrapped and never retried."""

    def test_authentication_error(self, mock_openai_client: MagicMock) -> None:
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        response = httpx.Response(401, request=request)
        mock_openai_client.chat.completions.create.side_effect = OpenAIAuthenticationError(
            "bad key", response=response, body=None
        )

        with pytest.raises(AuthenticationError):
            OpenAIProvider(client=mock_openai_client).complete(_thread())
        assert mock_openai_client.chat.completions.create.call_count == 1

    def test_connection_error(self, mock_openai_client: MagicMock) -> None:
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        mock_openai_client.chat.completions.create.side_effect = APIConnectionError(request=request)

        with pytest.raises(ProviderError, match="Connection error"):
            OpenAIProvider(client=mock_openai_client).complete(_thread())
        assert mock_openai_client.chat.completions.create.call_count == 1
