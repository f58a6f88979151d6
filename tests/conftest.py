"""Pytest configuration and fixtures."""

import logging
import os
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import structlog

from chat_samples.core.config import AzureAIConfig, Settings, get_settings
from chat_samples.providers.base import BaseChatProvider, CompletionResponse, Message, ToolDefinition
from chat_samples.samples.base import SampleContext
from chat_samples.utils.resources import ResourceStore


@pytest.fixture(autouse=True, scope="session")
def quiet_logging() -> None:
    """Drop log events below CRITICAL so sample output stays readable."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
        cache_logger_on_first_use=False,
    )


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test away from real config files and variables."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.upper().startswith(("AZUREAI", "CHAT_SAMPLES_")):
            monkeypatch.delenv(key)
    get_settings.cache_clear()


class FakeProvider(BaseChatProvider):
    """Provider that replays scripted responses and records requests."""

    provider_name = "fake"
    default_model = "gpt-4o"

    def __init__(
        self,
        responses: list[CompletionResponse | str | Exception] | None = None,
        default: str = "ok",
    ) -> None:
        self.responses = list(responses or [])
        self.default = default
        self.calls: list[dict[str, Any]] = []

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
        self.calls.append(
            {
                "messages": list(messages),
                "tools": tools,
                "json_mode": json_mode,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        reply = self.responses.pop(0) if self.responses else self.default
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, str):
            return CompletionResponse(content=reply, model=self.default_model)
        return reply


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def make_provider() -> type[FakeProvider]:
    """Give tests the fake provider class for scripted replies."""
    return FakeProvider


@pytest.fixture
def azure_config() -> AzureAIConfig:
    return AzureAIConfig(endpoint="https://example.openai.azure.com/", chat_model_id="gpt-4o", api_key="test-key")


@pytest.fixture
def settings(azure_config: AzureAIConfig) -> Settings:
    return Settings(azure_ai=azure_config)


@pytest.fixture
def sample_context(azure_config: AzureAIConfig, settings: Settings, fake_provider: FakeProvider) -> SampleContext:
    return SampleContext(config=azure_config, settings=settings, resources=ResourceStore(), provider=fake_provider)


@pytest.fixture
def mock_openai_client() -> MagicMock:
    """Create a mock OpenAI client."""
    mock_client = MagicMock()

    mock_response = MagicMock()
    mock_response.choices = [MagicMock()]
    mock_response.choices[0].message.content = "Mock response"
    mock_response.choices[0].message.tool_calls = None
    mock_response.choices[0].finish_reason = "stop"
    mock_response.usage.prompt_tokens = 10
    mock_response.usage.completion_tokens = 20
    mock_response.model = "gpt-4o"

    mock_client.chat.completions.create.return_value = mock_response
    return mock_client
