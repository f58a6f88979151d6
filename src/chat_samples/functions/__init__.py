"""Functions and plugins the model can call."""

from chat_samples.functions.plugin import (
    KernelFunction,
    NativeFunction,
    Plugin,
    PromptFunction,
    json_schema_for,
    kernel_function,
)

__all__ = [
    "KernelFunction",
    "NativeFunction",
    "Plugin",
    "PromptFunction",
    "json_schema_for",
    "kernel_function",
]
