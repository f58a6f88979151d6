"""Core utilities for the chat samples.

This module exports the fundamental building blocks:
- Configuration management
- Error handling
- Logging
- Retry utilities
"""

from chat_samples.core.config import (
    MISSING_CONFIG_MESSAGE,
    AzureAIConfig,
    Settings,
    get_settings,
)
from chat_samples.core.errors import (
    AuthenticationError,
    ChatSamplesError,
    ConfigurationError,
    ContentFilterError,
    ContextLengthError,
    MissingArgumentError,
    ModelNotFoundError,
    PromptConfigError,
    ProviderError,
    RateLimitError,
    RequestTimeoutError,
    ResourceNotFoundError,
    ResponseParseError,
    RetryableError,
    ServiceUnavailableError,
    ToolInvocationError,
)
from chat_samples.core.logging import LogContext, get_logger, log_llm_call, setup_logging
from chat_samples.core.retry import create_retry_decorator

__all__ = [
    # Config
    "MISSING_CONFIG_MESSAGE",
    "AzureAIConfig",
    "Settings",
    "get_settings",
    # Errors
    "AuthenticationError",
    "ChatSamplesError",
    "ConfigurationError",
    "ContentFilterError",
    "ContextLengthError",
    "MissingArgumentError",
    "ModelNotFoundError",
    "PromptConfigError",
    "ProviderError",
    "RateLimitError",
    "RequestTimeoutError",
    "ResourceNotFoundError",
    "ResponseParseError",
    "RetryableError",
    "ServiceUnavailableError",
    "ToolInvocationError",
    # Logging
    "LogContext",
    "get_logger",
    "log_llm_call",
    "setup_logging",
    # Retry
    "create_retry_decorator",
]
