"""Chat Samples - a console gallery of Azure OpenAI chat completion samples.

The package wraps a chat completion endpoint with a small orchestration
layer: prompt templates, declarative prompt documents, plugins the model
can call, and JSON-mode parsing.

Quick start:
    from chat_samples import AzureOpenAIProvider, ChatHistory, ChatService, get_settings

    settings = get_settings()
    service = ChatService(AzureOpenAIProvider(settings.azure_ai, settings))
    history = ChatHistory("You are a helpful assistant.")
    history.add_user_message("Hello!")
    print(service.get_response(history))
"""

__version__ = "0.1.0"

# Core utilities
from chat_samples.core import (
    AzureAIConfig,
    Settings,
    get_logger,
    get_settings,
    setup_logging,
)

# Orchestration
from chat_samples.chat import ChatHistory, ChatService
from chat_samples.functions import Plugin, PromptFunction, kernel_function
from chat_samples.prompts import PromptTemplate, load_prompt_config, render

# Provider interface
from chat_samples.providers import (
    AzureOpenAIProvider,
    CompletionResponse,
    ImagePart,
    Message,
    Role,
    ToolCall,
    ToolDefinition,
    Usage,
    get_provider,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "AzureAIConfig",
    "Settings",
    "get_logger",
    "get_settings",
    "setup_logging",
    # Orchestration
    "ChatHistory",
    "ChatService",
    "Plugin",
    "PromptFunction",
    "PromptTemplate",
    "kernel_function",
    "load_prompt_config",
    "render",
    # Providers
    "AzureOpenAIProvider",
    "CompletionResponse",
    "ImagePart",
    "Message",
    "Role",
    "ToolCall",
    "ToolDefinition",
    "Usage",
    "get_provider",
]
