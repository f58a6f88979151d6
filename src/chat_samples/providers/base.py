"""Abstract base class for chat completion providers.

This module defines the message and response types shared by the samples
and the interface a provider implements, so the orchestration layer never
touches an SDK object directly.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Role(str, Enum):
    """Message roles in a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


@dataclass
class ImagePart:
    """An image attached to a user message, by URL or data URI."""

    url: str
    detail: str = "auto"

    @property
    def is_data_uri(self) -> bool:
        return self.url.startswith("data:")


@dataclass
class Message:
    """A message in a conversation."""

    role: Role
    content: str
    images: list[ImagePart] = field(default_factory=list)
    name: str | None = None
    tool_call_id: str | None = None
    tool_calls: list[dict[str, Any]] | None = None

    @classmethod
    def system(cls, content: str) -> "Message":
        """Create a system message."""
        return cls(role=Role.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str, images: list[ImagePart] | None = None) -> "Message":
        """Create a user message, optionally with image attachments."""
        return cls(role=Role.USER, content=content, images=list(images or []))

    @classmethod
    def assistant(cls, content: str) -> "Message":
        """Create an assistant message."""
        return cls(role=Role.ASSISTANT, content=content)

    @classmethod
    def tool(cls, content: str, tool_call_id: str) -> "Message":
        """Create a tool response message."""
        return cls(role=Role.TOOL, content=content, tool_call_id=tool_call_id)


@dataclass
class ToolDefinition:
    """Definition of a tool/function the model can call."""

    name: str
    description: str
    parameters: dict[str, Any]

    def to_openai_format(self) -> dict[str, Any]:
        """Convert to OpenAI tools API format."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }


@dataclass
class ToolCall:
    """A tool call made by the model."""

    id: str
    name: str
    arguments: str  # JSON string

    def to_openai_format(self) -> dict[str, Any]:
        """Convert to the assistant ``tool_calls`` entry format."""
        return {
            "id": self.id,
            "type": "function",
            "function": {"name": self.name, "arguments": self.arguments},
        }


@dataclass
class Usage:
    """Token usage statistics."""

    input_tokens: int
    output_tokens: int

    @property
    def total_tokens(self) -> int:
        """Total tokens used."""
        return self.input_tokens + self.output_tokens


@dataclass
class CompletionResponse:
    """Response from a completion request."""

    content: str | None
    model: str
    usage: Usage | None = None
    tool_calls: list[ToolCall] = field(default_factory=list)
    finish_reason: str | None = None
    raw_response: Any = None


class BaseChatProvider(ABC):
    """Abstract base class for chat completion providers."""

    provider_name: str = "base"
    default_model: str = ""

    @abstractmethod
    def complete(
        self,
        messages: list[Message],
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        tools: list[ToolDefinition] | None = None,
        json_mode: bool = False,
        **kwargs: Any,
    ) -> CompletionResponse:
        """Generate a completion for the given messages.

        Args:
            messages: The conversation history.
            model: The model to use. Defaults to provider's default.
            temperature: Sampling temperature (0-2).
            max_tokens: Maximum tokens to generate.
            tools: Available tools for function calling.
            json_mode: Ask the model to return a JSON object.
            **kwargs: Additional provider-specific parameters.

        Returns:
            The completion response.
        """
        ...
