"""Tests for token utilities."""

from llm_labs.labs.tokens import turn_usage_report
from llm_labs.providers.base import AssistantTurn, SystemTurn, ToolCallRequest, UsageStats, UserTurn
from llm_labs.utils.tokens import count_tokens, estimate_message_tokens, get_encoding_for_model


class TestCountTokens:
    """Tests for count_tokens function."""

    def test_count_simple_text(self) -> None:
        """Test counting tokens in simple text."""
        tokens = count_tokens("Hello, world!", "gpt-4o")

        assert isinstance(tokens, int)
        assert 0 < tokens < 10

    def test_count_empty_text(self) -> None:
        assert count_tokens("", "gpt-5-mini") == 0

    def test_unknown_model_uses_default_encoding(self) -> None:
        assert get_encoding_for_model("some-future-model").name == "o200k_base"


class TestEstimateMessageTokens:
    """Tests for estimate_message_tokens."""

    def test_grows_with_thread(self) -> None:
        short = [SystemTurn("You are a food critic."), UserTurn("Chipotle?")]
        longer = [*short, AssistantTurn("Overrated burrito bowls."), UserTurn("In-N-Out then?")]

        assert estimate_message_tokens(longer) > estimate_message_tokens(short)

    def test_includes_tool_calls(self) -> None:
        call = ToolCallRequest(id="call_1", function_name="get_restaurant_stats", raw_arguments='{"chain": "Chipotle"}')
        plain = [UserTurn("hi"), AssistantTurn("")]
        with_call = [UserTurn("hi"), AssistantTurn("", tool_calls=(call,))]

        assert estimate_message_tokens(with_call) > estimate_message_tokens(plain)


class TestTurnUsageReport:
    """Tests for the tokens lab usage report."""

    def test_full_usage(self) -> None:
        report = turn_usage_report(UsageStats(10, 20, 30), messages_in_thread=3)

        assert report == {
            "input_prompt_tokens": 10,
            "output_completion_tokens": 20,
            "total_tokens": 30,
            "messages_in_thread": 3,
        }

    def test_total_falls_back_to_sum(self) -> None:
        report = turn_usage_report(UsageStats(10, 5, None), messages_in_thread=3)
        assert report["total_tokens"] == 15

    def test_missing_usage_is_na(self) -> None:
        report = turn_usage_report(None, messages_in_thread=1)

        assert report["input_prompt_tokens"] == "n/a"
        assert report["output_completion_tokens"] == "n/a"
        assert report["total_tokens"] == "n/a"
        assert report["messages_in_thread"] == 1

    def test_zero_counts_are_na(self) -> None:
        report = turn_usage_report(UsageStats(0, 0, 0), messages_in_thread=2)
        assert report["input_prompt_tokens"] == "n/a"
        assert report["total_tokens"] == "n/a"
