"""Tool Calls Lab.

Demonstrates a basic tool/function call flow:
1) The user asks about restaurants.
2) The assistant requests the tool with arguments.
3) The local function runs and its result goes back as a tool message.
4) The assistant uses the tool output to produce a final answer.
"""

from llm_labs.console import ConsoleReporter
from llm_labs.labs.common import init_provider, resolve_model
from llm_labs.orchestration import RoundTripResult, ToolCallRoundTrip
from llm_labs.providers import BaseLLMProvider
from llm_labs.thread import Thread
from llm_labs.tools import GET_RESTAURANT_STATS_TOOL, ToolExecutor

SYSTEM_PROMPT = (
    "You are a concise food analyst. When asked about specific restaurants, call the tool to fetch stats "
    "before giving a final answer. Keep replies to 3-5 sentences."
)

USER_QUESTION = "Compare the healthiness and value of Chipotle and Chick-fil-A, and pick a winner."


def main(
    provider: BaseLLMProvider | None = None,
    reporter: ConsoleReporter | None = None,
    model: str | None = None,
    question: str = USER_QUESTION,
) -> RoundTripResult:
    """Run the lab and return the round trip result."""
    reporter = reporter or ConsoleReporter()
    provider = init_provider(reporter, provider, model)
    model = resolve_model(provider, model)

    thread = Thread()
    thread.system(SYSTEM_PROMPT)
    thread.user(question)

    reporter.section("TOOL CALL FLOW")
    reporter.log(f"Model selected: {model}")
    reporter.log("USER:", question)

    round_trip = ToolCallRoundTrip(
        provider,
        tools=[GET_RESTAURANT_STATS_TOOL],
        executor=ToolExecutor(),
        reporter=reporter,
        model=model,
    )
    return round_trip.run(thread)


if __name__ == "__main__":
    main()
