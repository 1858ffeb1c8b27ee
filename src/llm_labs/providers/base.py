"""Chat turn types and the abstract completion provider.

A conversation is a sequence of turns drawn from a closed set of kinds:
system, user, assistant and tool. Each kind is its own frozen dataclass so
the fields it requires are checked when the turn is built, not when it is
sent.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from llm_labs.core.errors import ValidationError


class Role(str, Enum):
    """Message roles in a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


@dataclass(frozen=True)
class ToolCallRequest:
    """A tool call emitted by the model inside an assistant turn."""

    id: str
    function_name: str
    raw_arguments: str  # JSON string
    type: str = "function"

    def to_openai_format(self) -> dict[str, Any]:
        """Convert to the OpenAI ``tool_calls`` entry format."""
        return {
            "id": self.id,
            "type": self.type,
            "function": {"name": self.function_name, "arguments": self.raw_arguments},
        }


@dataclass(frozen=True)
class SystemTurn:
    """System instructions for the model."""

    content: str
    role: Role = field(default=Role.SYSTEM, init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise ValidationError("System turns require text content", field="content", value=self.content)


@dataclass(frozen=True)
class UserTurn:
    """A message written by the user."""

    content: str
    role: Role = field(default=Role.USER, init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise ValidationError("User turns require text content", field="content", value=self.content)


@dataclass(frozen=True)
class AssistantTurn:
    """A model reply, optionally requesting tool calls."""

    content: str | None = None
    tool_calls: tuple[ToolCallRequest, ...] = ()
    role: Role = field(default=Role.ASSISTANT, init=False)

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable tuple.
        object.__setattr__(self, "tool_calls", tuple(self.tool_calls))
        for tc in self.tool_calls:
            if not isinstance(tc, ToolCallRequest):
                raise ValidationError("tool_calls must contain ToolCallRequest entries", field="tool_calls", value=tc)

    @property
    def text(self) -> str:
        """Reply text with absent content rendered as an empty string."""
        return (self.content or "").strip()


@dataclass(frozen=True)
class ToolTurn:
    """The serialized result of one local tool execution."""

    content: str
    tool_call_id: str
    role: Role = field(default=Role.TOOL, init=False)

    def __post_init__(self) -> None:
        if not self.tool_call_id:
            raise ValidationError("Tool turns require a tool_call_id", field="tool_call_id", value=self.tool_call_id)
        if not isinstance(self.content, str):
            raise ValidationError("Tool turns require serialized content", field="content", value=self.content)


ChatTurn = SystemTurn | UserTurn | AssistantTurn | ToolTurn


def turn_to_openai_format(turn: ChatTurn) -> dict[str, Any]:
    """Convert a turn to the OpenAI chat message format."""
    message: dict[str, Any] = {"role": turn.role.value, "content": turn.content}
    if isinstance(turn, AssistantTurn):
        # Absent content is sent as an empty string alongside tool calls.
        message["content"] = turn.content or ""
        if turn.tool_calls:
            message["tool_calls"] = [tc.to_openai_format() for tc in turn.tool_calls]
    elif isinstance(turn, ToolTurn):
        message["tool_call_id"] = turn.tool_call_id
    return message


@dataclass
class ToolDefinition:
    """Definition of a tool/function the model can call."""

    name: str
    description: str
    parameters: dict[str, Any]

    def to_openai_format(self) -> dict[str, Any]:
        """Convert to OpenAI tools API format."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }


@dataclass(frozen=True)
class UsageStats:
    """Token usage reported by the provider; every field may be absent."""

    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None

    def as_report(self) -> dict[str, int | str]:
        """Usage with absent fields rendered as "n/a"."""
        return {
            "prompt_tokens": _or_na(self.prompt_tokens),
            "completion_tokens": _or_na(self.completion_tokens),
            "total_tokens": _or_na(self.total_tokens),
        }


def _or_na(value: int | None) -> int | str:
    return "n/a" if value is None else value


def usage_report(usage: UsageStats | None) -> dict[str, int | str]:
    """Usage report for a call that may not have reported usage at all."""
    return (usage or UsageStats()).as_report()


@dataclass
class CompletionResponse:
    """Response from a completion request."""

    turn: AssistantTurn
    model: str
    usage: UsageStats | None = None
    finish_reason: str | None = None
    raw_response: Any = None

    @property
    def content(self) -> str | None:
        return self.turn.content

    @property
    def tool_calls(self) -> tuple[ToolCallRequest, ...]:
        return self.turn.tool_calls


class BaseLLMProvider(ABC):
    """Abstract base class for chat-completion providers.

    Providers are stateless between calls: every call receives the full
    thread and returns exactly one assistant turn.
    """

    provider_name: str = "base"
    default_model: str = ""

    @abstractmethod
    def complete(
        self,
        messages: Sequence[ChatTurn],
        model: str | None = None,
        tools: list[ToolDefinition] | None = None,
        **kwargs: Any,
    ) -> CompletionResponse:
        """Generate one assistant turn for the given thread.

        Args:
            messages: The full conversation so far. Must not be empty.
            model: The model to use. Defaults to provider's default.
            tools: Available tools for function calling.
            **kwargs: Sampling parameters passed through to the provider.

        Returns:
            The completion response.
        """
        ...
