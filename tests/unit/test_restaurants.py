"""Tests for the restaurant stats fixture."""

import pytest

from llm_labs.tools.restaurants import (
    GET_RESTAURANT_STATS_TOOL,
    RESTAURANT_DB,
    get_restaurant_stats,
    normalize_chain_name,
)


class TestNormalizeChainName:
    """Tests for normalize_chain_name."""

    def test_lowercases_and_trims(self) -> None:
        assert normalize_chain_name("  Shake Shack ") == "shake shack"

    def test_strips_punctuation_but_keeps_hyphens(self) -> None:
        assert normalize_chain_name("Chick-Fil-A!!") == "chick-fil-a"
        assert normalize_chain_name("Wendy's") == "wendys"


class TestGetRestaurantStats:
    """Tests for get_restaurant_stats."""

    def test_exact_key(self) -> None:
        assert get_restaurant_stats("chipotle") == RESTAURANT_DB["chipotle"]

    @pytest.mark.parametrize("name", ["Chick-Fil-A", "chick fil a", "CHICKFILA!!"])
    def test_aliases_resolve_to_same_entry(self, name: str) -> None:
        """Casing and punctuation do not change which entry is found."""
        assert get_restaurant_stats(name) == RESTAURANT_DB["chick-fil-a"]

    def test_in_n_out_alias(self) -> None:
        assert get_restaurant_stats("In N Out Burger") == RESTAURANT_DB["in-n-out"]

    def test_shake_shack_alias(self) -> None:
        assert get_restaurant_stats("shake-shack") == RESTAURANT_DB["shake shack"]

    def test_rule_order_is_the_tie_break(self) -> None:
        """A name matching several rules resolves to the earliest rule."""
        assert get_restaurant_stats("chipotle vs chick-fil-a") == RESTAURANT_DB["chipotle"]
        assert get_restaurant_stats("chicken shake") == RESTAURANT_DB["chick-fil-a"]

    @pytest.mark.parametrize("name", ["chipotle", "Chipotle Mexican Grill"])
    def test_returned_record_is_a_copy(self, name: str) -> None:
        """Editing a lookup result leaves the fixture untouched."""
        record = get_restaurant_stats(name)
        assert record is not None
        record["health_score"] = 0

        assert RESTAURANT_DB["chipotle"]["health_score"] == 74
        assert get_restaurant_stats("chipotle") == RESTAURANT_DB["chipotle"]

    def test_unknown_chain(self) -> None:
        assert get_restaurant_stats("Wendy's") is None
        assert get_restaurant_stats("") is None


class TestToolDefinition:
    """Tests for the declared tool schema."""

    def test_openai_format(self) -> None:
        payload = GET_RESTAURANT_STATS_TOOL.to_openai_format()

        assert payload["type"] == "function"
        assert payload["function"]["name"] == "get_restaurant_stats"
        assert payload["function"]["parameters"]["required"] == ["chain"]
        assert payload["function"]["parameters"]["additionalProperties"] is False
