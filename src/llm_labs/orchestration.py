"""Single tool-call round trip between the model and local tools.

The flow is strictly sequential:

1. Send the thread (with tool declarations) and append the assistant turn,
   tool calls included, before anything else.
2. If the model asked for no tools, stop; no second call is made.
3. Run each requested tool in model order and append one tool turn per
   call, in the same order.
4. Send the grown thread again and append the final assistant turn.

The assistant turn carrying the tool calls has to precede the tool turns,
otherwise the API cannot match tool results to the calls on the next request.

Tool calls whose type is not ``function`` are logged and skipped, but they
stay on the assistant turn. No tool turn answers them, so the API will
reject the second request if the model ever emits one.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from llm_labs.console import ConsoleReporter, SilentReporter
from llm_labs.core.logging import get_logger
from llm_labs.providers.base import (
    BaseLLMProvider,
    CompletionResponse,
    ToolDefinition,
    ToolTurn,
    usage_report,
)
from llm_labs.thread import Thread
from llm_labs.tools.executor import ToolExecutor

logger = get_logger(__name__)


class RoundTripState(str, Enum):
    """Where a round trip currently stands."""

    AWAITING_FIRST_RESPONSE = "awaiting_first_response"
    INSPECTING_TOOL_CALLS = "inspecting_tool_calls"
    EXECUTING_TOOLS = "executing_tools"
    AWAITING_FINAL_RESPONSE = "awaiting_final_response"
    DONE = "done"


@dataclass
class ToolExecution:
    """Outcome of one local tool call."""

    tool_call_id: str
    function_name: str
    raw_arguments: str
    result: Any


@dataclass
class RoundTripResult:
    """What a round trip produced."""

    thread: Thread
    first: CompletionResponse
    final: CompletionResponse | None = None
    executions: list[ToolExecution] = field(default_factory=list)

    @property
    def used_tools(self) -> bool:
        return self.final is not None

    @property
    def answer(self) -> str:
        """The final assistant text, or the direct answer when no tools ran."""
        response = self.final or self.first
        return response.turn.text

    @property
    def remote_calls(self) -> int:
        return 2 if self.final is not None else 1


class ToolCallRoundTrip:
    """Drive one request → tools → request exchange over a shared thread."""

    def __init__(
        self,
        provider: BaseLLMProvider,
        tools: list[ToolDefinition],
        executor: ToolExecutor | None = None,
        reporter: ConsoleReporter | None = None,
        model: str | None = None,
    ) -> None:
        self.provider = provider
        self.tools = tools
        self.executor = executor or ToolExecutor()
        self.reporter = reporter or SilentReporter()
        self.model = model
        self.state = RoundTripState.AWAITING_FIRST_RESPONSE

    def _complete(self, thread: Thread) -> CompletionResponse:
        return self.provider.complete(thread.turns, model=self.model, tools=self.tools)

    def run(self, thread: Thread) -> RoundTripResult:
        """Run the exchange, appending every turn to ``thread``.

        Provider errors propagate unchanged.
        """
        self.state = RoundTripState.AWAITING_FIRST_RESPONSE
        first = self._complete(thread)
        thread.append(first.turn)
        result = RoundTripResult(thread=thread, first=first)

        self.reporter.log("First call usage (tokens):", usage_report(first.usage))

        self.state = RoundTripState.INSPECTING_TOOL_CALLS
        tool_calls = first.tool_calls
        if not tool_calls:
            self.reporter.log("Assistant did not request any tool calls. Full message:")
            self.reporter.log({"role": first.turn.role.value, "content": first.content})
            self.state = RoundTripState.DONE
            return result

        self.reporter.log("Assistant requested tool calls:")
        for tc in tool_calls:
            self.reporter.log(f"- {tc.function_name}({tc.raw_arguments}) → id={tc.id}")

        self.state = RoundTripState.EXECUTING_TOOLS
        for tc in tool_calls:
            if tc.type != "function":
                logger.warning("unsupported_tool_call_type", tool_call_id=tc.id, type=tc.type)
                continue

            output = self.executor.execute(tc.function_name, tc.raw_arguments)
            self.reporter.log(f"Local tool execution for {tc.function_name}:", _printable(output))
            thread.append(ToolTurn(content=self.executor.serialize(output), tool_call_id=tc.id))
            result.executions.append(
                ToolExecution(
                    tool_call_id=tc.id,
                    function_name=tc.function_name,
                    raw_arguments=tc.raw_arguments,
                    result=output,
                )
            )

        self.reporter.section("Full Message Chain with tool calls and tool results")
        self.reporter.log(thread.to_json())

        self.state = RoundTripState.AWAITING_FINAL_RESPONSE
        final = self._complete(thread)
        thread.append(final.turn)
        result.final = final

        self.reporter.log("Second call usage (tokens):", usage_report(final.usage))
        self.reporter.log("ASSISTANT (final):", final.turn.text)

        self.state = RoundTripState.DONE
        return result


def _printable(value: Any) -> Any:
    return "null" if value is None else value


def run_tool_call_round_trip(
    provider: BaseLLMProvider,
    thread: Thread,
    tools: list[ToolDefinition],
    executor: ToolExecutor | None = None,
    reporter: ConsoleReporter | None = None,
    model: str | None = None,
) -> RoundTripResult:
    """Convenience wrapper around :class:`ToolCallRoundTrip`."""
    return ToolCallRoundTrip(provider, tools, executor=executor, reporter=reporter, model=model).run(thread)
