"""Tests for JSON response parsing."""

import pytest

from chat_samples.core.errors import ResponseParseError
from chat_samples.utils.structured import CreativityScore, parse_json_object, parse_model, strip_code_fence


class TestStripCodeFence:
    """Tests for strip_code_fence."""

    def test_plain_json_unchanged(self) -> None:
        """Test content without a fence."""
        assert strip_code_fence(' {"a": 1} ') == '{"a": 1}'

    def test_json_fence_removed(self) -> None:
        """Test a ```json fenced block."""
        assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence_removed(self) -> None:
        """Test a fence without a language."""
        assert strip_code_fence('```\n{"a": 1}\n```') == '{"a": 1}'


class TestParseJsonObject:
    """Tests for parse_json_object."""

    def test_object(self) -> None:
        """Test a valid object."""
        assert parse_json_object('{"score": 42}') == {"score": 42}

    @pytest.mark.parametrize("content", [None, "", "   "])
    def test_empty_content(self, content: str | None) -> None:
        """Test that an empty reply fails."""
        with pytest.raises(ResponseParseError, match="Empty response"):
            parse_json_object(content)

    def test_invalid_json(self) -> None:
        """Test that prose fails and keeps the content."""
        with pytest.raises(ResponseParseError) as exc_info:
            parse_json_object("I rate this 42 out of 100.")

        assert exc_info.value.content == "I rate this 42 out of 100."

    def test_array_rejected(self) -> None:
        """Test that a non-object fails."""
        with pytest.raises(ResponseParseError, match="Expected a JSON object"):
            parse_json_object("[1, 2]")


class TestParseModel:
    """Tests for parse_model."""

    def test_creativity_score(self) -> None:
        """Test parsing a score reply."""
        score = parse_model('{"score": 85, "notes": "Vivid imagery"}', CreativityScore)

        assert score.score == 85
        assert score.notes == "Vivid imagery"

    def test_notes_optional(self) -> None:
        """Test a reply without notes."""
        assert parse_model('{"score": 10}', CreativityScore).notes == ""

    @pytest.mark.parametrize("content", ['{"score": 0}', '{"score": 101}', '{"notes": "no score"}'])
    def test_invalid_scores(self, content: str) -> None:
        """Test scores out of range or missing."""
        with pytest.raises(ResponseParseError, match="CreativityScore"):
            parse_model(content, CreativityScore)
