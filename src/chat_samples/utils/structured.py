"""Parsing of JSON-mode responses.

Models asked for JSON sometimes wrap it in a markdown fence or return
nothing at all. Every failure here raises ``ResponseParseError`` so the
caller can print a message and carry on with the next step.
"""

import json
import re
from typing import Any, TypeVar

from pydantic import BaseModel, Field, ValidationError

from chat_samples.core.errors import ResponseParseError

M = TypeVar("M", bound=BaseModel)

_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*\n(.*?)\n?```$", re.DOTALL | re.IGNORECASE)


class CreativityScore(BaseModel):
    """Creativity rating returned by the JSON response sample."""

    score: int = Field(ge=1, le=100)
    notes: str = ""


def strip_code_fence(content: str) -> str:
    """Remove a surrounding ```json fence, if any."""
    stripped = content.strip()
    match = _FENCE_PATTERN.match(stripped)
    return match.group(1).strip() if match else stripped


def parse_json_object(content: str | None) -> dict[str, Any]:
    """Parse a response that should contain a single JSON object.

    Raises:
        ResponseParseError: If the content is empty, not JSON, or not an object.
    """
    if not content or not content.strip():
        raise ResponseParseError("Empty response", content)
    try:
        data = json.loads(strip_code_fence(content))
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Invalid JSON: {e}", content) from e
    if not isinstance(data, dict):
        raise ResponseParseError(f"Expected a JSON object, got {type(data).__name__}", content)
    return data


def parse_model(content: str | None, model_cls: type[M]) -> M:
    """Parse a JSON object response into a pydantic model.

    Raises:
        ResponseParseError: If parsing or validation fails.
    """
    data = parse_json_object(content)
    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        raise ResponseParseError(f"Response does not match {model_cls.__name__}: {e}", content) from e
