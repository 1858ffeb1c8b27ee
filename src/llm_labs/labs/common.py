"""Setup shared by every lab."""

from llm_labs.console import ConsoleReporter
from llm_labs.core.config import get_settings
from llm_labs.providers import BaseLLMProvider, get_provider

FOOD_CRITIC_SYSTEM_PROMPT = (
    "You are an articulate but concise food critic debating the best fast casual restaurant. "
    "Keep replies to 1–2 sentences, cite specific menu items, taste, health, value, and consistency. "
    "Be snarky, sarcastic, and a general contrarian."
)


def init_provider(
    reporter: ConsoleReporter,
    provider: BaseLLMProvider | None = None,
    model: str | None = None,
) -> BaseLLMProvider:
    """Return the given provider, or build the configured one.

    Raises:
        ConfigurationError: If OPENAI_API_KEY is missing. Nothing has been
            sent over the network at that point.
    """
    if provider is not None:
        return provider

    settings = get_settings()
    key = settings.require_openai_key()
    reporter.log("OPENAI_API_KEY found. Initializing OpenAI client...")
    built = get_provider(settings.default_provider, api_key=key, default_model=model)
    reporter.log("OpenAI client initialized.")
    return built


def resolve_model(provider: BaseLLMProvider, model: str | None = None) -> str:
    """The model a lab will use: explicit override, else the provider default."""
    return model or provider.default_model or get_settings().openai_model
