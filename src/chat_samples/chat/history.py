"""Ordered conversation history."""

from collections.abc import Iterator

from chat_samples.providers.base import ImagePart, Message


class ChatHistory:
    """The messages of one conversation, oldest first."""

    def __init__(self, system_message: str | None = None) -> None:
        self.messages: list[Message] = []
        if system_message:
            self.add_system_message(system_message)

    def add_message(self, message: Message) -> None:
        self.messages.append(message)

    def add_system_message(self, content: str) -> None:
        self.add_message(Message.system(content))

    def add_user_message(self, content: str, images: list[ImagePart] | None = None) -> None:
        self.add_message(Message.user(content, images=images))

    def add_assistant_message(self, content: str) -> None:
        self.add_message(Message.assistant(content))

    def clear(self) -> None:
        self.messages.clear()

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)
