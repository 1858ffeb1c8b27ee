"""Restaurant stats fixture and the ``get_restaurant_stats`` tool.

The lookup table is a static, hand-authored dataset standing in for a live
data source. Names are normalized, matched exactly, then matched against an
ordered list of aliasing rules; the first rule that fires wins.
"""

import re
from collections.abc import Callable
from typing import Literal, TypedDict

from llm_labs.providers.base import ToolDefinition


class RestaurantStats(TypedDict):
    """Basic health/value stats for a fast-casual chain."""

    chain: str
    health_score: int  # 0-100, higher is healthier
    price_level: Literal["$", "$$", "$$$"]
    top_item: str
    avg_calories_signature_item: int


RESTAURANT_DB: dict[str, RestaurantStats] = {
    "chipotle": {
        "chain": "Chipotle",
        "health_score": 74,
        "price_level": "$$",
        "top_item": "Chicken burrito bowl",
        "avg_calories_signature_item": 690,
    },
    "chick-fil-a": {
        "chain": "Chick-fil-A",
        "health_score": 58,
        "price_level": "$",
        "top_item": "Chicken sandwich",
        "avg_calories_signature_item": 440,
    },
    "in-n-out": {
        "chain": "In-N-Out",
        "health_score": 55,
        "price_level": "$",
        "top_item": "Double-Double",
        "avg_calories_signature_item": 670,
    },
    "shake shack": {
        "chain": "Shake Shack",
        "health_score": 60,
        "price_level": "$$",
        "top_item": "ShackBurger",
        "avg_calories_signature_item": 700,
    },
}

# Evaluated top to bottom; order is the tie-break.
ALIAS_RULES: list[tuple[Callable[[str], bool], str]] = [
    (lambda key: "chipotle" in key, "chipotle"),
    (lambda key: "chick" in key, "chick-fil-a"),
    (lambda key: "in" in key and "out" in key, "in-n-out"),
    (lambda key: "shake" in key, "shake shack"),
]

_DISALLOWED_CHARS = re.compile(r"[^a-z0-9\-\s]")


def normalize_chain_name(name: str) -> str:
    """Lower-case, trim and drop everything but letters, digits, hyphens and spaces."""
    return _DISALLOWED_CHARS.sub("", name.lower().strip())


def get_restaurant_stats(chain: str) -> RestaurantStats | None:
    """Look up a chain by name, falling back to the alias rules.

    Returns:
        A copy of the fixture record, or None when nothing matches.
    """
    key = normalize_chain_name(chain)
    direct = RESTAURANT_DB.get(key)
    if direct is not None:
        return RestaurantStats(**direct)

    for matches, target in ALIAS_RULES:
        if matches(key):
            return RestaurantStats(**RESTAURANT_DB[target])
    return None


GET_RESTAURANT_STATS_TOOL = ToolDefinition(
    name="get_restaurant_stats",
    description=(
        "Look up basic health/value stats for a fast-casual restaurant by name. "
        "Returns health score, price, and top item."
    ),
    parameters={
        "type": "object",
        "properties": {
            "chain": {
                "type": "string",
                "description": 'The restaurant brand name to look up (e.g., "Chipotle", "Chick-fil-A").',
            },
        },
        "required": ["chain"],
        "additionalProperties": False,
    },
)
