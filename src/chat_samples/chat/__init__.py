"""Conversation history and the chat completion service."""

from chat_samples.chat.history import ChatHistory
from chat_samples.chat.service import DEFAULT_MAX_TOOL_ROUNDS, ChatService

__all__ = [
    "DEFAULT_MAX_TOOL_ROUNDS",
    "ChatHistory",
    "ChatService",
]
