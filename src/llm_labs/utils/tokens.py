"""Token counting utilities using tiktoken.

The tokens lab prints a local estimate of the thread size next to the usage
the API reports, so students can see where prompt tokens come from.
"""

from collections.abc import Iterable
from functools import lru_cache

import tiktoken

from llm_labs.providers.base import ChatTurn, turn_to_openai_format

DEFAULT_ENCODING = "o200k_base"

# Model to encoding mapping
MODEL_ENCODINGS: dict[str, str] = {
    "gpt-5": "o200k_base",
    "gpt-5-mini": "o200k_base",
    "gpt-5-nano": "o200k_base",
    "gpt-4o": "o200k_base",
    "gpt-4o-mini": "o200k_base",
    "gpt-4-turbo": "cl100k_base",
    "gpt-4": "cl100k_base",
    "gpt-3.5-turbo": "cl100k_base",
}


@lru_cache(maxsize=10)
def get_encoding(encoding_name: str) -> tiktoken.Encoding:
    """Get a cached tiktoken encoding.

    Args:
        encoding_name: Name of the encoding (e.g., "o200k_base").

    Returns:
        The tiktoken Encoding object.
    """
    return tiktoken.get_encoding(encoding_name)


@lru_cache(maxsize=20)
def get_encoding_for_model(model: str) -> tiktoken.Encoding:
    """Get the tiktoken encoding for a specific model.

    Args:
        model: The model name (e.g., "gpt-5-mini").

    Returns:
        The tiktoken Encoding object appropriate for the model.
    """
    if model in MODEL_ENCODINGS:
        return get_encoding(MODEL_ENCODINGS[model])

    try:
        return tiktoken.encoding_for_model(model)
    except KeyError:
        return get_encoding(DEFAULT_ENCODING)


def count_tokens(text: str, model: str = "gpt-5-mini") -> int:
    """Count the number of tokens in a text string.

    Args:
        text: The text to count tokens for.
        model: The model to use for encoding (affects token count).

    Returns:
        The number of tokens in the text.
    """
    encoding = get_encoding_for_model(model)
    return len(encoding.encode(text))


def estimate_message_tokens(
    messages: Iterable[ChatTurn],
    model: str = "gpt-5-mini",
) -> int:
    """Estimate prompt tokens for a thread of chat turns.

    This includes overhead for message formatting, so it approximates the
    prompt_tokens the API reports for the same thread.

    Args:
        messages: The turns that would be sent.
        model: The model to use for encoding.

    Returns:
        Estimated total token count.
    """
    encoding = get_encoding_for_model(model)

    # Token overhead per message (varies by model, using GPT-4 estimate)
    tokens_per_message = 3  # <|start|>role<|sep|>

    total = 0
    for turn in messages:
        total += tokens_per_message
        for key, value in turn_to_openai_format(turn).items():
            if value is None:
                continue
            total += len(encoding.encode(value if isinstance(value, str) else str(value)))

    total += 3  # Assistant reply priming
    return total
