"""OpenAI provider implementation.

This module sends a thread of chat turns to the OpenAI chat completions API
and converts the first choice back into an assistant turn. Failures are
mapped onto the project's error types and propagate; nothing is retried.
"""

import time
from collections.abc import Sequence
from typing import Any, cast

from openai import APIConnectionError, APIStatusError, OpenAI

from llm_labs.core.config import get_settings
from llm_labs.core.errors import AuthenticationError, ProviderError, ValidationError
from llm_labs.core.logging import get_logger, log_llm_call
from llm_labs.providers.base import (
    AssistantTurn,
    BaseLLMProvider,
    ChatTurn,
    CompletionResponse,
    ToolCallRequest,
    ToolDefinition,
    UsageStats,
    turn_to_openai_format,
)

logger = get_logger(__name__)


class OpenAIProvider(BaseLLMProvider):  # type: ignore[misc]
    """OpenAI chat completions provider."""

    provider_name = "openai"

    def __init__(
        self,
        api_key: str | None = None,
        default_model: str | None = None,
        client: Any = None,
    ) -> None:
        """Initialize the OpenAI provider.

        Args:
            api_key: OpenAI API key. Defaults to OPENAI_API_KEY.
            default_model: Default model. Defaults to OPENAI_MODEL or gpt-5-mini.
            client: Pre-built client, mainly for tests.

        Raises:
            ConfigurationError: If no API key is available.
        """
        settings = get_settings()
        self.default_model = default_model or settings.openai_model
        if client is not None:
            self._client = client
            return

        self.api_key = api_key or settings.require_openai_key()
        self._client = OpenAI(api_key=self.api_key)

    def _convert_messages(self, messages: Sequence[ChatTurn]) -> list[dict[str, Any]]:
        """Convert turns to OpenAI API format."""
        return [turn_to_openai_format(turn) for turn in messages]

    def _convert_tools(self, tools: list[ToolDefinition] | None) -> list[dict[str, Any]] | None:
        """Convert ToolDefinition objects to OpenAI API format."""
        if not tools:
            return None
        return [tool.to_openai_format() for tool in tools]

    def _handle_error(self, error: Exception) -> None:
        """Convert OpenAI errors to LLM Labs errors."""
        if isinstance(error, APIStatusError):
            if error.status_code == 401:
                raise AuthenticationError(str(error), provider=self.provider_name) from error
            raise ProviderError(
                str(error),
                provider=self.provider_name,
                details={"status_code": error.status_code},
            ) from error
        elif isinstance(error, APIConnectionError):
            raise ProviderError(f"Connection error: {error}", provider=self.provider_name) from error
        else:
            raise ProviderError(str(error), provider=self.provider_name) from error

    def _convert_tool_calls(self, raw_tool_calls: Any) -> tuple[ToolCallRequest, ...]:
        tool_calls = []
        for tc in raw_tool_calls or []:
            func = getattr(tc, "function", None)
            tool_calls.append(
                ToolCallRequest(
                    id=tc.id,
                    function_name=getattr(func, "name", "") or "",
                    raw_arguments=getattr(func, "arguments", "") or "",
                    type=getattr(tc, "type", None) or "function",
                )
            )
        return tuple(tool_calls)

    def _convert_usage(self, raw_usage: Any) -> UsageStats | None:
        if raw_usage is None:
            return None
        return UsageStats(
            prompt_tokens=getattr(raw_usage, "prompt_tokens", None),
            completion_tokens=getattr(raw_usage, "completion_tokens", None),
            total_tokens=getattr(raw_usage, "total_tokens", None),
        )

    def complete(
        self,
        messages: Sequence[ChatTurn],
        model: str | None = None,
        tools: list[ToolDefinition] | None = None,
        **kwargs: Any,
    ) -> CompletionResponse:
        """Generate a completion using OpenAI."""
        if not messages:
            raise ValidationError("Cannot request a completion for an empty thread", field="messages")

        model = model or self.default_model
        request: dict[str, Any] = {
            "model": model,
            "messages": self._convert_messages(messages),
        }
        converted_tools = self._convert_tools(tools)
        if converted_tools:
            request["tools"] = converted_tools
        # Only forward sampling knobs the caller actually set.
        request.update({k: v for k, v in kwargs.items() if v is not None})

        start_time = time.time()

        try:
            response = self._client.chat.completions.create(**cast(Any, request))
        except Exception as e:
            self._handle_error(e)
            raise  # Re-raise if not converted

        latency_ms = (time.time() - start_time) * 1000

        if not response.choices:
            raise ProviderError("Response contained no choices", provider=self.provider_name)
        choice = response.choices[0]
        turn = AssistantTurn(
            content=choice.message.content,
            tool_calls=self._convert_tool_calls(choice.message.tool_calls),
        )
        usage = self._convert_usage(getattr(response, "usage", None))

        log_llm_call(
            logger,
            provider=self.provider_name,
            model=model,
            prompt_tokens=usage.prompt_tokens if usage else None,
            completion_tokens=usage.completion_tokens if usage else None,
            total_tokens=usage.total_tokens if usage else None,
            latency_ms=latency_ms,
            tool_calls=len(turn.tool_calls),
        )

        return CompletionResponse(
            turn=turn,
            model=getattr(response, "model", model),
            usage=usage,
            finish_reason=getattr(choice, "finish_reason", None),
            raw_response=response,
        )
