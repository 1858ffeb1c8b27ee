"""Message Basics Lab.

Builds a thread one turn at a time: a system prompt, then three user
messages, each followed by the assistant's reply. The whole thread is sent
on every call, which is how the model "remembers" the conversation.

Features demonstrated:
- System, user and assistant roles
- Appending replies to the thread
- Asking for a summary without adding it to the thread
"""

from llm_labs.console import ConsoleReporter
from llm_labs.labs.common import FOOD_CRITIC_SYSTEM_PROMPT, init_provider, resolve_model
from llm_labs.providers import AssistantTurn, BaseLLMProvider, UserTurn
from llm_labs.thread import Thread

USER_TURNS = [
    "I think Chipotle is the best fast casual spot—customizable bowls, fresh salsas. What do you think?",
    "But for value and consistency, it is hard to go wrong with In-n-Out, don't you think?",
    "Then again, there are some crazy fans of Chick-fil-A, even with their sad chicken sandwich "
    "with just two little pickles.",
]

SUMMARY_REQUEST = (
    "Summarize this conversation in 3-4 concise bullet-like sentences: core positions, key comparisons, "
    "and the final stance. No markdown, no bullets—just short sentences."
)


def main(
    provider: BaseLLMProvider | None = None,
    reporter: ConsoleReporter | None = None,
    model: str | None = None,
) -> Thread:
    """Run the lab and return the conversation thread."""
    reporter = reporter or ConsoleReporter()
    provider = init_provider(reporter, provider, model)
    model = resolve_model(provider, model)

    thread = Thread()
    thread.system(FOOD_CRITIC_SYSTEM_PROMPT)

    reporter.log(f"Model selected: {model}")
    reporter.log("System prompt set:", FOOD_CRITIC_SYSTEM_PROMPT)

    for i, user_msg in enumerate(USER_TURNS, 1):
        reporter.section(f"TURN {i}")

        reporter.log(f"Adding user message #{i} to the thread.")
        thread.user(user_msg)
        reporter.log("USER:", user_msg)

        reporter.log("Requesting assistant reply using the full conversation so far...")
        response = provider.complete(thread.turns, model=model)

        reply = response.turn.text
        reporter.log("ASSISTANT:", reply)
        reporter.log("Reply received. Appending to the thread.")
        thread.append(AssistantTurn(content=reply))

    reporter.section("Full Conversation (JSON)")
    reporter.log(thread.transcript())

    reporter.section("Summary")
    reporter.log("Requesting a concise summary (3-4 short sentences) of the conversation...")
    summary = provider.complete(thread.with_turn(UserTurn(SUMMARY_REQUEST)), model=model)
    reporter.log(summary.turn.text)

    return thread


if __name__ == "__main__":
    main()
