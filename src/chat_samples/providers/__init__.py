"""Chat provider implementations.

This module exports the message types and the provider used by the samples.
"""

from chat_samples.core.config import AzureAIConfig, Settings
from chat_samples.providers.azure_openai import AzureOpenAIProvider, build_client, is_azure_endpoint
from chat_samples.providers.base import (
    BaseChatProvider,
    CompletionResponse,
    ImagePart,
    Message,
    Role,
    ToolCall,
    ToolDefinition,
    Usage,
)

__all__ = [
    # Base classes
    "BaseChatProvider",
    "CompletionResponse",
    "ImagePart",
    "Message",
    "Role",
    "ToolCall",
    "ToolDefinition",
    "Usage",
    # Providers
    "AzureOpenAIProvider",
    "build_client",
    "is_azure_endpoint",
    # Factory function
    "get_provider",
]


def get_provider(config: AzureAIConfig, settings: Settings | None = None) -> BaseChatProvider:
    """Factory function to get a provider for a resolved configuration.

    Args:
        config: The ``AzureAI`` configuration section.
        settings: Application settings.

    Returns:
        A provider bound to the configured endpoint and model.

    Raises:
        ConfigurationError: If the endpoint or model id is missing.
    """
    return AzureOpenAIProvider(config, settings=settings)
