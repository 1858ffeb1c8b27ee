"""LLM Labs - narrated chat-completion demos for the classroom.

Each lab sends a short thread of chat turns to a hosted model and prints
sequence-numbered, paced output so an audience can follow the exchange.

Quick start:
    from llm_labs import Thread, get_provider

    provider = get_provider("openai")
    thread = Thread()
    thread.system("You are a concise food critic.")
    thread.user("Chipotle or Shake Shack?")
    response = provider.complete(thread.turns)
    print(response.turn.text)
"""

__version__ = "0.1.0"

# Core utilities
from llm_labs.core import (
    ConfigurationError,
    LabsError,
    ProviderError,
    Settings,
    ValidationError,
    get_logger,
    get_settings,
    setup_logging,
)

# Console output
from llm_labs.console import ConsoleReporter

# Tool-call round trip
from llm_labs.orchestration import RoundTripResult, RoundTripState, ToolCallRoundTrip, run_tool_call_round_trip

# Provider interface
from llm_labs.providers import (
    AssistantTurn,
    BaseLLMProvider,
    ChatTurn,
    CompletionResponse,
    OpenAIProvider,
    Role,
    SystemTurn,
    ToolCallRequest,
    ToolDefinition,
    ToolTurn,
    UsageStats,
    UserTurn,
    get_provider,
)
from llm_labs.thread import Thread
from llm_labs.tools import ToolExecutor, get_restaurant_stats

__all__ = [
    # Version
    "__version__",
    # Core
    "ConfigurationError",
    "LabsError",
    "ProviderError",
    "Settings",
    "ValidationError",
    "get_logger",
    "get_settings",
    "setup_logging",
    # Console
    "ConsoleReporter",
    # Orchestration
    "RoundTripResult",
    "RoundTripState",
    "ToolCallRoundTrip",
    "run_tool_call_round_trip",
    # Providers
    "AssistantTurn",
    "BaseLLMProvider",
    "ChatTurn",
    "CompletionResponse",
    "OpenAIProvider",
    "Role",
    "SystemTurn",
    "ToolCallRequest",
    "ToolDefinition",
    "ToolTurn",
    "UsageStats",
    "UserTurn",
    "get_provider",
    # Thread and tools
    "Thread",
    "ToolExecutor",
    "get_restaurant_stats",
]
