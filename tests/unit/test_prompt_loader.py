"""Tests for declarative prompt documents."""

from pathlib import Path

import pytest

from chat_samples.core.errors import PromptConfigError, ResourceNotFoundError
from chat_samples.prompts.loader import load_prompt_config, load_prompt_resource
from chat_samples.utils.resources import ResourceStore

STORY_DOCUMENT = """
name: GenerateStory
template: |
  Tell a story about {{$topic}} that is {{$length}} sentences long.
template_format: semantic-kernel
description: A function that generates a story about a topic.
input_variables:
  - name: topic
    description: The topic of the story.
    default: Dog
  - name: length
    default: 3
execution_settings:
  default:
    temperature: 0.6
"""


class TestLoadPromptConfig:
    """Tests for load_prompt_config."""

    def test_parses_document(self) -> None:
        """Test the fields of a full document."""
        config = load_prompt_config(STORY_DOCUMENT)

        assert config.name == "GenerateStory"
        assert config.template == "Tell a story about {{$topic}} that is {{$length}} sentences long."
        assert config.description == "A function that generates a story about a topic."
        assert [var.name for var in config.input_variables] == ["topic", "length"]
        assert config.settings.temperature == 0.6

    def test_defaults_are_strings(self) -> None:
        """Test that numeric YAML defaults become strings."""
        config = load_prompt_config(STORY_DOCUMENT)
        assert config.default_arguments() == {"topic": "Dog", "length": "3"}

    def test_bind_overrides_defaults(self) -> None:
        """Test merging caller arguments over defaults."""
        config = load_prompt_config(STORY_DOCUMENT)

        bound = config.bind({"topic": "Cat"})

        assert bound == {"topic": "Cat", "length": "3"}
        assert config.prompt_template.render(bound) == "Tell a story about Cat that is 3 sentences long."

    def test_minimal_document(self) -> None:
        """Test that only the template is required."""
        config = load_prompt_config("template: Hello {{$name}}")

        assert config.name is None
        assert config.input_variables == []
        assert config.settings.temperature is None

    def test_extra_execution_settings_kept(self) -> None:
        """Test that unknown settings are preserved."""
        config = load_prompt_config("template: x\nexecution_settings:\n  default:\n    top_p: 0.5\n")
        assert config.settings.model_extra == {"top_p": 0.5}

    @pytest.mark.parametrize(
        "text",
        [
            "template: [unclosed",
            "- just\n- a list\n",
            "name: NoTemplate\n",
            "template: '   '\n",
            "template: x\ntemplate_format: handlebars\n",
            "",
        ],
    )
    def test_invalid_documents(self, text: str) -> None:
        """Test that unusable documents raise PromptConfigError."""
        with pytest.raises(PromptConfigError):
            load_prompt_config(text)


class TestLoadPromptResource:
    """Tests for load_prompt_resource."""

    def test_bundled_story_prompt(self) -> None:
        """Test the prompt used by the story sample."""
        config = load_prompt_resource("GenerateStory.yaml", ResourceStore())

        assert config.prompt_template.variables() == ["topic", "length"]
        assert config.default_arguments() == {"topic": "Dog", "length": "3"}

    def test_missing_resource(self, tmp_path: Path) -> None:
        """Test a missing prompt file."""
        with pytest.raises(ResourceNotFoundError):
            load_prompt_resource("GenerateStory.yaml", ResourceStore(tmp_path))
