"""Utility functions for the chat samples.

This module exports resource access, structured response parsing and
token counting helpers.
"""

from chat_samples.utils.resources import BUNDLED_RESOURCES_DIR, ResourceStore
from chat_samples.utils.structured import (
    CreativityScore,
    parse_json_object,
    parse_model,
    strip_code_fence,
)
from chat_samples.utils.tokens import (
    check_context_fit,
    count_tokens,
    fit_to_context,
    get_context_window,
    get_encoding_for_model,
    truncate_to_token_limit,
)

__all__ = [
    "BUNDLED_RESOURCES_DIR",
    "CreativityScore",
    "ResourceStore",
    "check_context_fit",
    "count_tokens",
    "fit_to_context",
    "get_context_window",
    "get_encoding_for_model",
    "parse_json_object",
    "parse_model",
    "strip_code_fence",
    "truncate_to_token_limit",
]
