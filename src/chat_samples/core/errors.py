"""Custom exception hierarchy for the chat samples.

The hierarchy mirrors how failures are scoped to a single sample:
- Configuration errors are detected before any network call
- Resource errors are handled per sample (fallback text or skip)
- Provider errors abort the current sample
- Parse errors are caught locally and execution moves on
"""

from typing import Any


class ChatSamplesError(Exception):
    """Base exception for all chat sample errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(ChatSamplesError):
    """Raised when configuration is invalid or missing."""

    pass


class ResourceNotFoundError(ChatSamplesError):
    """Raised when a resource file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Resource file not found: {path}", {"path": path})


class PromptConfigError(ChatSamplesError):
    """Raised when a declarative prompt document cannot be used."""

    pass


class MissingArgumentError(ChatSamplesError):
    """Raised by strict rendering when placeholders have no bound value."""

    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(f"Missing template arguments: {', '.join(names)}", {"names": names})


class ResponseParseError(ChatSamplesError):
    """Raised when a structured response cannot be parsed."""

    def __init__(self, message: str, content: str | None = None) -> None:
        self.content = content
        super().__init__(message)


class ToolInvocationError(ChatSamplesError):
    """Raised when the tool calling loop cannot reach a final answer."""

    pass


class ProviderError(ChatSamplesError):
    """Base exception for provider-related errors."""

    def __init__(
        self,
        message: str,
        provider: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.provider = provider
        super().__init__(message, {"provider": provider, **(details or {})})


class AuthenticationError(ProviderError):
    """Raised when API authentication fails."""

    pass


class RateLimitError(ProviderError):
    """Raised when rate limit is exceeded.

    This error is retryable when retries are enabled.
    """

    def __init__(
        self,
        message: str,
        provider: str,
        retry_after: float | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(
            message,
            provider,
            {"retry_after": retry_after, **(details or {})},
        )


class ModelNotFoundError(ProviderError):
    """Raised when the requested model or deployment is not available."""

    def __init__(self, model: str, provider: str) -> None:
        self.model = model
        super().__init__(f"Model '{model}' not found", provider, {"model": model})


class ContextLengthError(ProviderError):
    """Raised when input exceeds model's context length."""

    pass


class ContentFilterError(ProviderError):
    """Raised when content is blocked by safety filters."""

    pass


class RetryableError(ChatSamplesError):
    """Base class for errors that can be retried."""

    pass


class RequestTimeoutError(RetryableError):
    """Raised when a request times out."""

    pass


class ServiceUnavailableError(RetryableError):
    """Raised when the service is temporarily unavailable."""

    pass
