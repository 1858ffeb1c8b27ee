"""Token Usage Lab.

Runs a six-turn conversation and prints the token usage the API reports
after every reply, next to a local tiktoken estimate of the same thread.
Prompt tokens grow each turn because the whole thread is resent.
"""

from llm_labs.console import ConsoleReporter
from llm_labs.labs.common import FOOD_CRITIC_SYSTEM_PROMPT, init_provider, resolve_model
from llm_labs.providers import AssistantTurn, BaseLLMProvider, UsageStats
from llm_labs.thread import Thread
from llm_labs.utils.tokens import estimate_message_tokens

USER_TURNS = [
    "I think Chipotle is the best fast casual spot—customizable bowls, fresh salsas. What do you think?",
    "For value and consistency, In-N-Out seems hard to beat—agree or disagree?",
    "Some fans swear by Chick-fil-A—do you buy the hype or is it overrated?",
    "Panera's soups and bread bowls are a comfort food classic—does that earn them a spot at the top?",
    "Shake Shack's crinkle fries and shakes are iconic, but do they outshine the burgers?",
    "What about MOD Pizza—does the build-your-own pizza model stack up against the others?",
]


def turn_usage_report(usage: UsageStats | None, messages_in_thread: int) -> dict[str, int | str]:
    """Per-turn usage where zero or missing counts print as "n/a".

    The total falls back to prompt + completion when the API omits it.
    """
    usage = usage or UsageStats()
    prompt = usage.prompt_tokens or 0
    completion = usage.completion_tokens or 0
    total = usage.total_tokens if usage.total_tokens is not None else prompt + completion
    return {
        "input_prompt_tokens": prompt or "n/a",
        "output_completion_tokens": completion or "n/a",
        "total_tokens": total or "n/a",
        "messages_in_thread": messages_in_thread,
    }


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
        reporter.log("Local estimate of prompt tokens:", estimate_message_tokens(thread, model))

        reporter.log("Requesting assistant reply using the full conversation so far...")
        response = provider.complete(thread.turns, model=model)

        reply = response.turn.text
        reporter.log("ASSISTANT:", reply)
        reporter.log("Reply received. Appending to the thread.")
        thread.append(AssistantTurn(content=reply))

        reporter.log("Token usage for this turn:", turn_usage_report(response.usage, len(thread)))

    return thread


if __name__ == "__main__":
    main()
