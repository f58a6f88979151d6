"""Prompt templates and declarative prompt documents."""

from chat_samples.prompts.loader import (
    ExecutionSettings,
    InputVariable,
    PromptConfig,
    load_prompt_config,
    load_prompt_resource,
)
from chat_samples.prompts.template import PLACEHOLDER_PATTERN, PromptTemplate, find_variables, render

__all__ = [
    "ExecutionSettings",
    "InputVariable",
    "PLACEHOLDER_PATTERN",
    "PromptConfig",
    "PromptTemplate",
    "find_variables",
    "load_prompt_config",
    "load_prompt_resource",
    "render",
]
