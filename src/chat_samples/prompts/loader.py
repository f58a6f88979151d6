"""Declarative prompt documents.

A prompt document is a YAML file describing one prompt function:

    name: GenerateStory
    template: |
      Tell a story about {{$topic}} that is {{$length}} sentences long.
    description: A function that generates a story about a topic.
    input_variables:
      - name: topic
        default: Dog
    execution_settings:
      default:
        temperature: 0.6

The whole document is parsed with PyYAML and validated with pydantic.
"""

from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from chat_samples.core.errors import PromptConfigError
from chat_samples.prompts.template import PromptTemplate
from chat_samples.utils.resources import ResourceStore

SUPPORTED_TEMPLATE_FORMATS = ("semantic-kernel",)


class InputVariable(BaseModel):
    """A declared template argument."""

    name: str
    description: str = ""
    default: str | None = None
    is_required: bool = True

    @field_validator("default", mode="before")
    @classmethod
    def _stringify_default(cls, value: Any) -> Any:
        # YAML reads `default: 3` as an int; arguments are always strings.
        return None if value is None else str(value)


class ExecutionSettings(BaseModel):
    """Completion parameters attached to a prompt."""

    model_config = {"extra": "allow"}

    temperature: float | None = None
    max_tokens: int | None = None


class PromptConfig(BaseModel):
    """A parsed prompt document."""

    name: str | None = None
    description: str = ""
    template: str
    template_format: str = "semantic-kernel"
    input_variables: list[InputVariable] = Field(default_factory=list)
    execution_settings: dict[str, ExecutionSettings] = Field(default_factory=dict)

    @field_validator("template")
    @classmethod
    def _strip_template(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("template must not be empty")
        return value

    @field_validator("template_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        if value not in SUPPORTED_TEMPLATE_FORMATS:
            raise ValueError(f"unsupported template_format {value!r}")
        return value

    @property
    def prompt_template(self) -> PromptTemplate:
        return PromptTemplate(self.template)

    @property
    def settings(self) -> ExecutionSettings:
        """The ``default`` execution settings, or an empty set."""
        return self.execution_settings.get("default", ExecutionSettings())

    def default_arguments(self) -> dict[str, str]:
        """Defaults of the declared input variables."""
        return {var.name: var.default for var in self.input_variables if var.default is not None}

    def bind(self, arguments: dict[str, str] | None = None) -> dict[str, str]:
        """Merge caller arguments over the declared defaults."""
        return {**self.default_arguments(), **(arguments or {})}


def load_prompt_config(text: str) -> PromptConfig:
    """Parse a YAML prompt document.

    Raises:
        PromptConfigError: If the YAML is invalid, not a mapping, or fails
            validation (e.g. no template).
    """
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise PromptConfigError(f"Invalid prompt YAML: {e}") from e

    if not isinstance(document, dict):
        raise PromptConfigError("Prompt document must be a mapping")

    try:
        return PromptConfig.model_validate(document)
    except ValidationError as e:
        raise PromptConfigError(f"Invalid prompt document: {e}") from e


def load_prompt_resource(name: str, resources: ResourceStore) -> PromptConfig:
    """Load a prompt document from the resource directory.

    Raises:
        ResourceNotFoundError: If the file does not exist.
        PromptConfigError: If the document is invalid.
    """
    return load_prompt_config(resources.read_text(name))
