"""Temperature Lab.

Runs the same prompt several times at a low and a high sampling temperature
while every other knob is held constant, then prints the outputs side by
side. Low temperature should repeat itself; high temperature should wander.
"""

from dataclasses import dataclass

from llm_labs.console import ConsoleReporter
from llm_labs.labs.common import init_provider
from llm_labs.providers import BaseLLMProvider, SystemTurn, UsageStats, UserTurn, usage_report
from llm_labs.providers.base import ChatTurn

# Routed models such as gpt-5 pick their own sampling settings, so this lab
# pins a model that honours temperature.
TEMPERATURE_MODEL = "gpt-4o-mini"

FIXED_PARAMS = {
    "top_p": 1,  # full distribution, so only temperature matters
    "presence_penalty": 0,
    "frequency_penalty": 0,
}

LOW_TEMPERATURE = 0.2
HIGH_TEMPERATURE = 1.0
TRIALS_PER_SETTING = 3
LOW_TEMPERATURE_SEED = 7


@dataclass
class Trial:
    text: str
    usage: UsageStats | None


def create_base_messages() -> list[ChatTurn]:
    return [
        SystemTurn(
            "You are a contrarian but concise food critic. Keep replies to exactly 2 sentences. "
            "Name one specific menu item and include one playful jab."
        ),
        UserTurn(
            "Give a contrarian take on the best fast-casual chain. "
            "Name a specific menu item and include one playful jab."
        ),
    ]


def run_trials(
    provider: BaseLLMProvider,
    temperature: float,
    trials: int,
    seed: int | None = None,
    model: str = TEMPERATURE_MODEL,
) -> list[Trial]:
    """Send identical messages ``trials`` times at one temperature."""
    outputs = []
    for _ in range(trials):
        response = provider.complete(
            create_base_messages(),
            model=model,
            temperature=temperature,
            seed=seed,
            **FIXED_PARAMS,
        )
        outputs.append(Trial(text=response.turn.text, usage=response.usage))
    return outputs


def _report(reporter: ConsoleReporter, label: str, trials: list[Trial]) -> None:
    for idx, trial in enumerate(trials, 1):
        reporter.log(f"[{label}] Trial {idx}")
        reporter.log(trial.text)
        reporter.log("Usage (tokens):", usage_report(trial.usage))


def main(
    provider: BaseLLMProvider | None = None,
    reporter: ConsoleReporter | None = None,
    model: str = TEMPERATURE_MODEL,
) -> dict[float, list[Trial]]:
    """Run the lab and return the trials keyed by temperature."""
    reporter = reporter or ConsoleReporter()
    provider = init_provider(reporter, provider, model)

    reporter.log(f"Model selected: {model}")
    reporter.log("Comparing outputs at two temperatures with identical prompts.")
    reporter.log("Low temperature encourages determinism; high temperature encourages diversity.")

    reporter.section(f"Low temperature ({LOW_TEMPERATURE}) - {TRIALS_PER_SETTING} trials")
    low = run_trials(provider, LOW_TEMPERATURE, TRIALS_PER_SETTING, seed=LOW_TEMPERATURE_SEED, model=model)
    _report(reporter, "Low t", low)

    reporter.section(f"High temperature ({HIGH_TEMPERATURE}) - {TRIALS_PER_SETTING} trials")
    high = run_trials(provider, HIGH_TEMPERATURE, TRIALS_PER_SETTING, model=model)
    _report(reporter, "High t", high)

    reporter.section("Summary")
    reporter.log("Low temperature should yield more similar phrasing; high temperature should show more variety.")

    return {LOW_TEMPERATURE: low, HIGH_TEMPERATURE: high}


if __name__ == "__main__":
    main()
