"""Chat-completion provider.

This module exports the turn types, the provider interface and the single
provider switch used by every lab.
"""

from llm_labs.providers.base import (
    AssistantTurn,
    BaseLLMProvider,
    ChatTurn,
    CompletionResponse,
    Role,
    SystemTurn,
    ToolCallRequest,
    ToolDefinition,
    ToolTurn,
    UsageStats,
    UserTurn,
    turn_to_openai_format,
    usage_report,
)
from llm_labs.providers.openai_provider import OpenAIProvider

__all__ = [
    # Turns and wire types
    "AssistantTurn",
    "ChatTurn",
    "CompletionResponse",
    "Role",
    "SystemTurn",
    "ToolCallRequest",
    "ToolDefinition",
    "ToolTurn",
    "UsageStats",
    "UserTurn",
    "turn_to_openai_format",
    "usage_report",
    # Providers
    "BaseLLMProvider",
    "OpenAIProvider",
    # Factory function
    "get_provider",
]


def get_provider(
    provider_name: str = "openai",
    **kwargs: object,
) -> BaseLLMProvider:
    """Factory function to get a provider instance.

    Args:
        provider_name: Name of the provider. Only "openai" is available.
        **kwargs: Additional arguments passed to the provider constructor.

    Returns:
        An instance of the requested provider.

    Raises:
        ValueError: If the provider name is not recognized.
        ConfigurationError: If the provider's API key is missing.
    """
    providers = {
        "openai": OpenAIProvider,
    }

    if provider_name not in providers:
        available = list(providers.keys())
        raise ValueError(f"Unknown provider: {provider_name}. Available: {available}")

    return providers[provider_name](**kwargs)
