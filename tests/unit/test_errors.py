"""Tests for error handling module."""

import pytest

from chat_samples.core.errors import (
    AuthenticationError,
    ChatSamplesError,
    ConfigurationError,
    MissingArgumentError,
    ModelNotFoundError,
    ProviderError,
    RateLimitError,
    RequestTimeoutError,
    ResourceNotFoundError,
    ResponseParseError,
    RetryableError,
)


class TestChatSamplesError:
    """Tests for base ChatSamplesError."""

    def test_basic_error(self) -> None:
        """Test basic error creation."""
        error = ChatSamplesError("Something went wrong")

        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.details == {}

    def test_error_with_details(self) -> None:
        """Test error with details."""
        error = ChatSamplesError("Error occurred", details={"code": 500})

        assert "Error occurred" in str(error)
        assert "code" in str(error)
        assert error.details["code"] == 500


class TestProviderError:
    """Tests for ProviderError."""

    def test_provider_error(self) -> None:
        """Test provider error creation."""
        error = ProviderError("API call failed", provider="azure_openai")

        assert error.provider == "azure_openai"
        assert error.details["provider"] == "azure_openai"

    def test_rate_limit_error(self) -> None:
        """Test rate limit error with retry_after."""
        error = RateLimitError("Rate limit exceeded", provider="azure_openai", retry_after=30.0)

        assert error.retry_after == 30.0
        assert error.details["retry_after"] == 30.0

    def test_model_not_found(self) -> None:
        """Test model not found error."""
        error = ModelNotFoundError(model="my-deployment", provider="azure_openai")

        assert error.model == "my-deployment"
        assert error.message == "Model 'my-deployment' not found"


class TestSampleErrors:
    """Tests for errors raised inside samples."""

    def test_resource_not_found(self) -> None:
        """Test the message names the path."""
        error = ResourceNotFoundError("/data/cat.jpg")

        assert error.path == "/data/cat.jpg"
        assert error.message == "Resource file not found: /data/cat.jpg"

    def test_missing_argument(self) -> None:
        """Test the message lists every name."""
        error = MissingArgumentError(["name", "age"])

        assert error.names == ["name", "age"]
        assert error.message == "Missing template arguments: name, age"

    def test_response_parse_error_keeps_content(self) -> None:
        """Test that the raw content is available."""
        error = ResponseParseError("Invalid JSON", content="not json")

        assert error.content == "not json"
        assert str(error) == "Invalid JSON"


class TestErrorHierarchy:
    """Tests for error class hierarchy."""

    def test_auth_error_is_provider_error(self) -> None:
        """Test that AuthenticationError inherits from ProviderError."""
        error = AuthenticationError("Test", provider="test")
        assert isinstance(error, ProviderError)
        assert isinstance(error, ChatSamplesError)

    def test_timeout_is_retryable(self) -> None:
        """Test that timeouts are retryable."""
        assert isinstance(RequestTimeoutError("slow"), RetryableError)

    def test_can_catch_by_base_class(self) -> None:
        """Test that specific errors can be caught by base class."""
        with pytest.raises(ChatSamplesError):
            raise ConfigurationError("missing")

        with pytest.raises(ProviderError):
            raise ModelNotFoundError("model", provider="test")
