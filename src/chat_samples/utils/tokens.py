"""Token counting utilities using tiktoken.

Used to keep document prompts inside a deployment's context window.
Azure deployment names are free-form, so unknown names fall back to the
``o200k_base`` encoding of current GPT-4o class models.
"""

from functools import lru_cache

import tiktoken

DEFAULT_ENCODING = "o200k_base"
DEFAULT_CONTEXT_WINDOW = 8192

# Model to encoding mapping
MODEL_ENCODINGS: dict[str, str] = {
    "gpt-4o": "o200k_base",
    "gpt-4o-mini": "o200k_base",
    "gpt-4.1": "o200k_base",
    "gpt-4.1-mini": "o200k_base",
    "gpt-4-turbo": "cl100k_base",
    "gpt-4": "cl100k_base",
    "gpt-35-turbo": "cl100k_base",
    "gpt-3.5-turbo": "cl100k_base",
}

# Context window sizes
MODEL_CONTEXT_WINDOWS: dict[str, int] = {
    "gpt-4o": 128000,
    "gpt-4o-mini": 128000,
    "gpt-4.1": 1047576,
    "gpt-4.1-mini": 1047576,
    "gpt-4-turbo": 128000,
    "gpt-4": 8192,
    "gpt-35-turbo": 16385,
    "gpt-3.5-turbo": 16385,
}


@lru_cache(maxsize=10)
def get_encoding(encoding_name: str) -> tiktoken.Encoding:
    """Get a cached tiktoken encoding."""
    return tiktoken.get_encoding(encoding_name)


@lru_cache(maxsize=20)
def get_encoding_for_model(model: str) -> tiktoken.Encoding:
    """Get the tiktoken encoding for a model or deployment name.

    Args:
        model: The model name (e.g., "gpt-4o").

    Returns:
        The tiktoken Encoding object appropriate for the model.
    """
    if model in MODEL_ENCODINGS:
        return get_encoding(MODEL_ENCODINGS[model])

    try:
        return tiktoken.encoding_for_model(model)
    except KeyError:
        return get_encoding(DEFAULT_ENCODING)


def count_tokens(text: str, model: str = "gpt-4o") -> int:
    """Count the number of tokens in a text string."""
    encoding = get_encoding_for_model(model)
    return len(encoding.encode(text))


def truncate_to_token_limit(
    text: str,
    max_tokens: int,
    model: str = "gpt-4o",
    truncation_marker: str = "...",
) -> str:
    """Truncate text to fit within a token limit.

    Args:
        text: The text to truncate.
        max_tokens: Maximum number of tokens allowed.
        model: The model to use for encoding.
        truncation_marker: Marker to append if truncated.

    Returns:
        The truncated text, or original if within limit.
    """
    encoding = get_encoding_for_model(model)
    tokens = encoding.encode(text)

    if len(tokens) <= max_tokens:
        return text

    marker_tokens = encoding.encode(truncation_marker)
    available_tokens = max_tokens - len(marker_tokens)

    if available_tokens <= 0:
        return truncation_marker

    return encoding.decode(tokens[:available_tokens]) + truncation_marker


def get_context_window(model: str) -> int:
    """Get the context window size for a model, 8192 if unknown."""
    return MODEL_CONTEXT_WINDOWS.get(model, DEFAULT_CONTEXT_WINDOW)


def check_context_fit(
    text: str,
    model: str = "gpt-4o",
    max_output_tokens: int = 4096,
) -> tuple[bool, int, int]:
    """Check if text fits within model's context window.

    Returns:
        Tuple of (fits, input_tokens, available_tokens).
    """
    input_tokens = count_tokens(text, model)
    available = get_context_window(model) - max_output_tokens
    return input_tokens <= available, input_tokens, available


def fit_to_context(
    text: str,
    model: str = "gpt-4o",
    max_output_tokens: int = 4096,
    reserved_tokens: int = 512,
) -> str:
    """Truncate text so it fits the context window next to the reply.

    A token covers at least one byte, so text whose UTF-8 length is within
    the budget is returned without encoding it.

    Args:
        text: Document text to send.
        model: The model or deployment name.
        max_output_tokens: Tokens reserved for the completion.
        reserved_tokens: Tokens reserved for instructions around the text.

    Returns:
        The text, truncated with "..." if it would not fit.
    """
    budget = get_context_window(model) - max_output_tokens - reserved_tokens
    if len(text.encode("utf-8")) <= budget:
        return text
    return truncate_to_token_limit(text, max(budget, 1), model)
