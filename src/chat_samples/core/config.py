"""Configuration management using Pydantic settings.

Settings are layered, highest precedence first:
- Explicit constructor arguments
- Environment variables (``AzureAI__Endpoint``, ``CHAT_SAMPLES_LOG_LEVEL``, ...)
- A ``.env`` file via python-dotenv
- ``appsettings.json`` in the working directory

The entry point loads settings once and passes the resolved values to the
samples; nothing below the CLI calls ``get_settings()`` on its own.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, Field, SecretStr, model_validator
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    EnvSettingsSource,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from chat_samples.core.errors import ConfigurationError

MISSING_CONFIG_MESSAGE = (
    "Azure AI configuration not found. "
    "Please set AzureAI:Endpoint and AzureAI:ChatModelId in appsettings.json"
)

DEFAULT_API_VERSION = "2024-10-21"

# Keys are compared lowercased with underscores removed, so "ChatModelId",
# "chat_model_id" and "CHATMODELID" all land on the same field.
_AZURE_KEYS = {
    "endpoint": "endpoint",
    "chatmodelid": "chat_model_id",
    "apikey": "api_key",
    "apiversion": "api_version",
}


def _squash(key: Any) -> str:
    return str(key).replace("_", "").lower()


def normalize_azure_keys(section: dict[str, Any]) -> dict[str, Any]:
    """Map section keys onto ``AzureAIConfig`` field names."""
    return {_AZURE_KEYS.get(_squash(key), key): value for key, value in section.items()}


def normalize_sources(data: dict[str, Any]) -> dict[str, Any]:
    """Put the ``AzureAI`` section of one source under ``azure_ai``.

    Each source spells the section differently (``AzureAI`` in JSON,
    ``azure_ai`` or ``azureai`` from the environment). With a single key and
    field names inside it, sources deep-merge value by value, so one
    ``AzureAI__ChatModelId`` variable overrides just the model id.
    """
    normalized: dict[str, Any] = {}
    for key, value in data.items():
        if _squash(key) == "azureai" and isinstance(value, dict):
            normalized.setdefault("azure_ai", {}).update(normalize_azure_keys(value))
        else:
            normalized[key] = value
    return normalized


class _EnvSource(EnvSettingsSource):
    def __call__(self) -> dict[str, Any]:
        return normalize_sources(super().__call__())


class _DotEnvSource(DotEnvSettingsSource):
    def __call__(self) -> dict[str, Any]:
        return normalize_sources(super().__call__())


class _JsonSource(JsonConfigSettingsSource):
    def __call__(self) -> dict[str, Any]:
        return normalize_sources(super().__call__())


class AzureAIConfig(BaseModel):
    """The ``AzureAI`` configuration section."""

    endpoint: str = ""
    chat_model_id: str = ""
    api_key: SecretStr | None = None
    api_version: str = DEFAULT_API_VERSION

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        normalized = normalize_azure_keys(data)
        if normalized.get("api_key") == "":
            normalized["api_key"] = None
        return normalized

    @property
    def is_configured(self) -> bool:
        """True when both the endpoint and the chat model id are set."""
        return bool(self.endpoint.strip() and self.chat_model_id.strip())

    @property
    def key(self) -> str | None:
        """Get the API key as string."""
        return self.api_key.get_secret_value() if self.api_key else None

    def ensure_configured(self) -> "AzureAIConfig":
        """Return self, or raise if the endpoint or model id is missing.

        Raises:
            ConfigurationError: With the message shown to the user.
        """
        if not self.is_configured:
            missing = [name for name in ("endpoint", "chat_model_id") if not getattr(self, name).strip()]
            raise ConfigurationError(MISSING_CONFIG_MESSAGE, {"missing": missing})
        return self


class Settings(BaseSettings):  # type: ignore[misc]
    """Application settings.

    App-level settings use the ``CHAT_SAMPLES_`` prefix
    (e.g. ``CHAT_SAMPLES_LOG_LEVEL=DEBUG``). The endpoint section is read
    from ``AzureAI`` in ``appsettings.json`` or ``AzureAI__<Key>`` variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHAT_SAMPLES_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        json_file="appsettings.json",
        json_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    azure_ai: AzureAIConfig = Field(
        default_factory=AzureAIConfig,
        validation_alias=AliasChoices("AzureAI", "azure_ai"),
    )

    # Default completion settings
    default_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    default_max_tokens: int = Field(default=4096, ge=1, le=128000)

    # Retry settings; zero means a failed call is reported, not repeated
    max_retries: int = Field(default=0, ge=0, le=10)
    retry_min_wait: float = Field(default=1.0, ge=0.1)
    retry_max_wait: float = Field(default=60.0, ge=1.0)

    # Logging settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "console"] = "console"

    # Resource files; None means the bundled resources directory
    resources_dir: Path | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            _EnvSource(settings_cls),
            _DotEnvSource(settings_cls),
            _JsonSource(settings_cls),
            file_secret_settings,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: The application settings singleton.
    """
    return Settings()
