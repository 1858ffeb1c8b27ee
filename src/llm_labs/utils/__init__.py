"""Utility functions for LLM Labs."""

from llm_labs.utils.tokens import (
    count_tokens,
    estimate_message_tokens,
    get_encoding,
    get_encoding_for_model,
)

__all__ = [
    "count_tokens",
    "estimate_message_tokens",
    "get_encoding",
    "get_encoding_for_model",
]
