"""Local tool execution.

Each tool call the model requests is resolved here by function name. A
malformed argument string is the one recoverable error in the labs: it is
returned as an error record so the model can react to it on the next call.
"""

import json
from collections.abc import Callable, Mapping
from typing import Any

from llm_labs.core.logging import get_logger
from llm_labs.tools.restaurants import get_restaurant_stats

logger = get_logger(__name__)

ToolHandler = Callable[[dict[str, Any]], Any]

PARSE_ERROR_MESSAGE = "Failed to parse arguments"


def _restaurant_stats_handler(args: dict[str, Any]) -> Any:
    return get_restaurant_stats(str(args.get("chain") or ""))


DEFAULT_HANDLERS: dict[str, ToolHandler] = {
    "get_restaurant_stats": _restaurant_stats_handler,
}


class ToolExecutor:
    """Resolve tool calls by name against a fixed set of handlers."""

    def __init__(self, handlers: Mapping[str, ToolHandler] | None = None) -> None:
        self.handlers = dict(DEFAULT_HANDLERS if handlers is None else handlers)

    def execute(self, function_name: str, raw_arguments: str) -> Any:
        """Run one tool call.

        Args:
            function_name: Name of the function the model asked for.
            raw_arguments: JSON-encoded argument object.

        Returns:
            The handler's result, None for unknown functions, or an error
            record when the arguments are not valid JSON (including input
            nested too deeply to decode).
        """
        try:
            parsed = json.loads(raw_arguments or "{}")
        except (json.JSONDecodeError, RecursionError):
            logger.warning("tool_arguments_unparseable", tool=function_name, raw_args=raw_arguments)
            return {"error": PARSE_ERROR_MESSAGE, "rawArgs": raw_arguments}

        handler = self.handlers.get(function_name)
        if handler is None:
            logger.info("tool_unknown", tool=function_name)
            return None

        args = parsed if isinstance(parsed, dict) else {}
        return handler(args)

    def serialize(self, result: Any) -> str:
        """Serialize a result for a tool turn (None becomes "null")."""
        return json.dumps(result)


def execute_tool(function_name: str, raw_arguments: str) -> Any:
    """Execute a tool call with the default handlers."""
    return ToolExecutor().execute(function_name, raw_arguments)
