"""Tests for prompt template rendering."""

import pytest

from chat_samples.core.errors import MissingArgumentError
from chat_samples.prompts.template import PromptTemplate, find_variables, render


class TestRender:
    """Tests for render function."""

    def test_no_placeholders_unchanged(self) -> None:
        """Test that plain text is returned as is."""
        text = "Tell me a story about a dog."
        assert render(text, {"topic": "cat"}) == text

    def test_binds_all_arguments(self) -> None:
        """Test the basic substitution example."""
        result = render("Hello {{$name}}, you are {{$age}}.", {"name": "Ada", "age": "36"})
        assert result == "Hello Ada, you are 36."

    def test_empty_arguments_leave_placeholders(self) -> None:
        """Test that unbound placeholders stay as literal text."""
        template = "Hello {{$name}}, you are {{$age}}."
        assert render(template, {}) == template

    def test_partial_binding(self) -> None:
        """Test that only bound placeholders are replaced."""
        assert render("{{$a}} and {{$b}}", {"a": "x"}) == "x and {{$b}}"

    def test_repeated_placeholder(self) -> None:
        """Test that every occurrence is replaced with the same value."""
        assert render("{{$x}}-{{$x}}", {"x": "7"}) == "7-7"

    def test_names_are_case_sensitive(self) -> None:
        """Test that names only match exactly."""
        assert render("{{$Name}}", {"name": "Ada"}) == "{{$Name}}"

    @pytest.mark.parametrize(
        "template",
        [
            "{{name}}",
            "{{ $name }}",
            "{{$name",
            "$name}}",
            "cost: $5 {{",
            "{{$1abc}}",
            "{{$na-me}}",
        ],
    )
    def test_malformed_delimiters_pass_through(self, template: str) -> None:
        """Test that anything outside the exact form is left alone."""
        assert render(template, {"name": "Ada", "1abc": "x", "na": "y"}) == template

    def test_values_are_not_rescanned(self) -> None:
        """Test that a value containing a placeholder is inserted literally."""
        assert render("{{$a}}", {"a": "{{$b}}", "b": "nope"}) == "{{$b}}"

    def test_input_not_mutated(self) -> None:
        """Test that the arguments mapping is not changed."""
        arguments = {"name": "Ada"}
        render("{{$name}} {{$other}}", arguments)
        assert arguments == {"name": "Ada"}

    def test_multiline_template(self) -> None:
        """Test rendering across lines."""
        template = "INPUT:\n{{$input}}\nEND"
        assert render(template, {"input": "line1\nline2"}) == "INPUT:\nline1\nline2\nEND"


class TestStrictRender:
    """Tests for strict rendering."""

    def test_strict_raises_on_missing(self) -> None:
        """Test that strict mode names every missing argument."""
        with pytest.raises(MissingArgumentError) as exc_info:
            render("Hello {{$name}}, you are {{$age}}.", {}, strict=True)

        assert exc_info.value.names == ["name", "age"]

    def test_strict_passes_when_bound(self) -> None:
        """Test that strict mode renders normally when complete."""
        assert render("{{$a}}", {"a": "1"}, strict=True) == "1"


class TestPromptTemplate:
    """Tests for PromptTemplate."""

    def test_variables_in_order_without_duplicates(self) -> None:
        """Test variable discovery."""
        template = PromptTemplate("{{$b}} {{$a}} {{$b}} {{ $c }}")
        assert template.variables() == ["b", "a"]

    def test_render_many_times(self) -> None:
        """Test that one template binds different argument sets."""
        template = PromptTemplate("Story about {{$topic}}")

        assert template.render({"topic": "Dog"}) == "Story about Dog"
        assert template.render({"topic": "Cat"}) == "Story about Cat"
        assert template.template == "Story about {{$topic}}"

    def test_find_variables_empty(self) -> None:
        """Test a template without placeholders."""
        assert find_variables("nothing here") == []
