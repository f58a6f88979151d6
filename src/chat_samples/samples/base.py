"""Shared plumbing for the samples.

Every sample receives a ``SampleContext`` built once by the entry point. It
carries the resolved configuration and creates providers and chat services
on demand, so a sample never reads configuration itself.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from chat_samples.chat.service import ChatService
from chat_samples.core.config import AzureAIConfig, Settings
from chat_samples.functions.plugin import Plugin
from chat_samples.providers import BaseChatProvider, get_provider
from chat_samples.utils.resources import ResourceStore

SEPARATOR = "\n" + "=" * 50 + "\n"


@dataclass
class SampleContext:
    """Everything a sample needs to talk to the model."""

    config: AzureAIConfig
    settings: Settings
    resources: ResourceStore = field(default_factory=ResourceStore)
    provider: BaseChatProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "SampleContext":
        return cls(
            config=settings.azure_ai,
            settings=settings,
            resources=ResourceStore(settings.resources_dir),
        )

    def get_provider(self) -> BaseChatProvider:
        """Return the injected provider, or build one on first use."""
        if self.provider is None:
            self.provider = get_provider(self.config, settings=self.settings)
        return self.provider

    def chat_service(self, plugins: Iterable[Plugin] = ()) -> ChatService:
        return ChatService(self.get_provider(), plugins=plugins)


def print_banner(title: str) -> None:
    print(f"=== {title} ===")
    print()


def print_user(text: str) -> None:
    print(f"[User]: {text}")


def print_reply(text: str, label: str = "Assistant") -> None:
    print(f"[{label}]: {text}")
    print()
