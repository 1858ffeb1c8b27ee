"""Local tools the model can call during the labs."""

from llm_labs.tools.executor import PARSE_ERROR_MESSAGE, ToolExecutor, execute_tool
from llm_labs.tools.restaurants import (
    ALIAS_RULES,
    GET_RESTAURANT_STATS_TOOL,
    RESTAURANT_DB,
    RestaurantStats,
    get_restaurant_stats,
    normalize_chain_name,
)

__all__ = [
    "ALIAS_RULES",
    "GET_RESTAURANT_STATS_TOOL",
    "PARSE_ERROR_MESSAGE",
    "RESTAURANT_DB",
    "RestaurantStats",
    "ToolExecutor",
    "execute_tool",
    "get_restaurant_stats",
    "normalize_chain_name",
]
