"""Azure OpenAI provider implementation.

This module provides the chat provider used by every sample. It speaks to an
Azure OpenAI deployment through ``openai.AzureOpenAI`` and to any other
OpenAI-compatible endpoint through ``openai.OpenAI(base_url=...)``, and
supports vision content, tools and JSON mode.
"""

import time
from typing import Any, cast
from urllib.parse import urlparse

from openai import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    AzureOpenAI,
    OpenAI,
    OpenAIError,
)
from openai import RateLimitError as OpenAIRateLimitError

from chat_samples.core.config import AzureAIConfig, Settings, get_settings
from chat_samples.core.errors import (
    AuthenticationError,
    ContentFilterError,
    ContextLengthError,
    ModelNotFoundError,
    ProviderError,
    RateLimitError,
    RequestTimeoutError,
    ServiceUnavailableError,
)
from chat_samples.core.logging import get_logger, log_llm_call
from chat_samples.core.retry import create_retry_decorator
from chat_samples.providers.base import (
    BaseChatProvider,
    CompletionResponse,
    Message,
    ToolCall,
    ToolDefinition,
    Usage,
)

logger = get_logger(__name__)

AZURE_HOST_SUFFIXES = (
    ".openai.azure.com",
    ".cognitiveservices.azure.com",
    ".services.ai.azure.com",
)


def is_azure_endpoint(endpoint: str) -> bool:
    """Return True when the endpoint host belongs to Azure OpenAI."""
    host = (urlparse(endpoint).hostname or "").lower()
    return host.endswith(AZURE_HOST_SUFFIXES)


def build_client(config: AzureAIConfig) -> OpenAI:
    """Create the SDK client for the configured endpoint.

    Without an API key the SDK falls back to ``AZURE_OPENAI_API_KEY``,
    ``AZURE_OPENAI_AD_TOKEN`` or ``OPENAI_API_KEY`` from the environment.

    Raises:
        AuthenticationError: If no credential can be found.
    """
    try:
        if is_azure_endpoint(config.endpoint):
            return AzureOpenAI(
                azure_endpoint=config.endpoint,
                api_key=config.key,
                api_version=config.api_version,
            )
        return OpenAI(base_url=config.endpoint, api_key=config.key)
    except OpenAIError as e:
        raise AuthenticationError(
            f"No credential available for {config.endpoint}: {e}",
            provider=AzureOpenAIProvider.provider_name,
        ) from e


class AzureOpenAIProvider(BaseChatProvider):
    """Chat provider backed by an Azure OpenAI deployment."""

    provider_name = "azure_openai"

    def __init__(
        self,
        config: AzureAIConfig,
        settings: Settings | None = None,
        client: Any = None,
    ) -> None:
        """Initialize the provider.

        Args:
            config: Resolved endpoint section; must be configured.
            settings: Application settings for defaults and retry budget.
            client: Pre-built SDK client, mainly for tests.
        """
        config.ensure_configured()
        settings = settings or get_settings()
        self.config = config
        self.default_model = config.chat_model_id
        self.default_temperature = settings.default_temperature
        self.default_max_tokens = settings.default_max_tokens

        self._client = client if client is not None else build_client(config)
        self._send = create_retry_decorator(settings=settings)(self._send_once)

    def _convert_message(self, msg: Message) -> dict[str, Any]:
        converted: dict[str, Any] = {"role": msg.role.value}
        if msg.images:
            parts: list[dict[str, Any]] = [{"type": "text", "text": msg.content}]
            for image in msg.images:
                parts.append(
                    {
                        "type": "image_url",
                        "image_url": {"url": image.url, "detail": image.detail},
                    }
                )
            converted["content"] = parts
        else:
            converted["content"] = msg.content
        if msg.name:
            converted["name"] = msg.name
        if msg.tool_call_id:
            converted["tool_call_id"] = msg.tool_call_id
        if msg.tool_calls:
            converted["tool_calls"] = msg.tool_calls
        return converted

    def _convert_messages(self, messages: list[Message]) -> list[dict[str, Any]]:
        """Convert Message objects to the chat completions format."""
        return [self._convert_message(msg) for msg in messages]

    def _convert_tools(self, tools: list[ToolDefinition] | None) -> list[dict[str, Any]] | None:
        if not tools:
            return None
        return [tool.to_openai_format() for tool in tools]

    def _handle_error(self, error: Exception, model: str) -> None:
        """Convert SDK errors to chat sample errors."""
        if isinstance(error, OpenAIRateLimitError):
            retry_after = None
            header = error.response.headers.get("retry-after") if error.response is not None else None
            if header:
                try:
                    retry_after = float(header)
                except ValueError:
                    retry_after = None
            raise RateLimitError(str(error), provider=self.provider_name, retry_after=retry_after) from error
        if isinstance(error, APIStatusError):
            message = str(error)
            lowered = message.lower()
            if error.status_code in (401, 403):
                raise AuthenticationError(message, provider=self.provider_name) from error
            if error.status_code == 404:
                raise ModelNotFoundError(model=model, provider=self.provider_name) from error
            if error.status_code == 400 and "context_length" in lowered:
                raise ContextLengthError(message, provider=self.provider_name) from error
            if error.status_code == 400 and "content_filter" in lowered:
                raise ContentFilterError(message, provider=self.provider_name) from error
            if error.status_code in (500, 502, 503, 504):
                raise ServiceUnavailableError(message, {"status_code": error.status_code}) from error
            raise ProviderError(message, provider=self.provider_name, details={"status_code": error.status_code}) from error
        if isinstance(error, APITimeoutError):
            raise RequestTimeoutError(f"Request timed out: {error}") from error
        if isinstance(error, APIConnectionError):
            raise ServiceUnavailableError(f"Connection error: {error}") from error
        raise ProviderError(str(error), provider=self.provider_name) from error

    def _send_once(self, request: dict[str, Any]) -> Any:
        try:
            return self._client.chat.completions.create(**request)
        except Exception as e:
            self._handle_error(e, request["model"])
            raise

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
        """Generate a completion using the configured deployment."""
        model = model or self.default_model
        request: dict[str, Any] = {
            "model": model,
            "messages": cast(Any, self._convert_messages(messages)),
            "temperature": temperature if temperature is not None else self.default_temperature,
            "max_tokens": max_tokens or self.default_max_tokens,
            **kwargs,
        }
        converted_tools = self._convert_tools(tools)
        if converted_tools:
            request["tools"] = converted_tools
        if json_mode:
            request["response_format"] = {"type": "json_object"}

        start_time = time.time()
        response = self._send(request)
        latency_ms = (time.time() - start_time) * 1000

        choice = response.choices[0]
        tool_calls = []
        if choice.message.tool_calls:
            for tc in choice.message.tool_calls:
                func = getattr(tc, "function", None)
                if func:
                    tool_calls.append(
                        ToolCall(
                            id=tc.id,
                            name=getattr(func, "name", ""),
                            arguments=getattr(func, "arguments", ""),
                        )
                    )

        usage = None
        if response.usage:
            usage = Usage(
                input_tokens=response.usage.prompt_tokens,
                output_tokens=response.usage.completion_tokens,
            )
        log_llm_call(
            logger,
            provider=self.provider_name,
            model=model,
            input_tokens=usage.input_tokens if usage else None,
            output_tokens=usage.output_tokens if usage else None,
            latency_ms=latency_ms,
            tool_calls=len(tool_calls),
            json_mode=json_mode,
        )
        if choice.finish_reason == "content_filter":
            logger.warning("completion_filtered", model=model)

        return CompletionResponse(
            content=choice.message.content,
            model=response.model,
            usage=usage,
            tool_calls=tool_calls,
            finish_reason=choice.finish_reason,
            raw_response=response,
        )
