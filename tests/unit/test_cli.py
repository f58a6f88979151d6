"""Tests for the console entry point."""

import os
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from chat_samples.cli import INVALID_SELECTION, main, parse_selection, run_sample
from chat_samples.core.config import MISSING_CONFIG_MESSAGE, AzureAIConfig, Settings
from chat_samples.samples import Sample
from chat_samples.samples.base import SampleContext


@pytest.fixture(autouse=True)
def no_logging_setup() -> Iterator[MagicMock]:
    with patch("chat_samples.cli.setup_logging") as setup:
        yield setup


@pytest.fixture
def context_factory(sample_context: SampleContext) -> Iterator[MagicMock]:
    """Make main() use the context with the scripted provider."""
    with patch("chat_samples.cli.SampleContext.from_settings", return_value=sample_context) as factory:
        yield factory


class TestParseSelection:
    """Tests for parse_selection."""

    @pytest.mark.parametrize("value, expected", [("3", 3), (" 10 ", 10), ("abc", None), ("", None), ("2.5", None)])
    def test_values(self, value: str, expected: int | None) -> None:
        """Test numeric and non-numeric input."""
        assert parse_selection(value) == expected


class TestRunSample:
    """Tests for run_sample."""

    @pytest.mark.parametrize("number", [None, 0, 11])
    def test_invalid_number(
        self, number: int | None, sample_context: SampleContext, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test numbers outside the menu."""
        assert run_sample(number, sample_context) is False
        assert INVALID_SELECTION in capsys.readouterr().out

    def test_missing_configuration_short_circuits(
        self, sample_context: SampleContext, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that no request is made without an endpoint."""
        sample_context.config = AzureAIConfig(chat_model_id="gpt-4o")

        assert run_sample(1, sample_context) is False

        assert MISSING_CONFIG_MESSAGE in capsys.readouterr().out
        assert sample_context.provider.calls == []

    def test_runs_selected_sample(self, sample_context: SampleContext, capsys: pytest.CaptureFixture[str]) -> None:
        """Test dispatch to the chosen sample."""
        assert run_sample(1, sample_context) is True
        assert "Generated Story: ok" in capsys.readouterr().out

    def test_crash_is_contained(self, sample_context: SampleContext, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that an unexpected exception is printed, not raised."""
        broken = Sample(1, "Broken", MagicMock(side_effect=RuntimeError("boom")))

        with patch("chat_samples.cli.get_sample", return_value=broken):
            assert run_sample(1, sample_context) is True

        assert "Error running sample: boom" in capsys.readouterr().out


class TestMain:
    """Tests for main."""

    def test_list(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test printing the menu."""
        assert main(["--list"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("Azure OpenAI Samples\n====================\n")
        assert "1. Step 01 - Azure OpenAI Chat Completion with Story Generation" in out
        assert "10. Step 10 - Azure OpenAI JSON Response Formatting" in out

    def test_sample_argument(
        self, settings: Settings, context_factory: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test running a sample named on the command line."""
        assert main(["1", "--no-wait"], settings=settings) == 0

        assert "Generated Story: ok" in capsys.readouterr().out
        context_factory.assert_called_once_with(settings)

    def test_invalid_argument(self, settings: Settings, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a non-numeric selection."""
        assert main(["seven", "--no-wait"], settings=settings) == 0
        assert INVALID_SELECTION in capsys.readouterr().out

    def test_menu_selection(
        self, settings: Settings, context_factory: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test choosing from the interactive menu and waiting to exit."""
        with patch("builtins.input", side_effect=["1", ""]) as fake_input:
            assert main([], settings=settings) == 0

        prompts = [call.args[0] for call in fake_input.call_args_list]
        assert prompts == ["Select a sample (1-10) or press Enter to exit: ", "Press Enter to exit..."]
        assert "Generated Story: ok" in capsys.readouterr().out

    def test_empty_selection_exits(self, settings: Settings, capsys: pytest.CaptureFixture[str]) -> None:
        """Test pressing Enter at the menu."""
        with patch("builtins.input", return_value="") as fake_input:
            assert main([], settings=settings) == 0

        fake_input.assert_called_once()
        assert "Available samples:" in capsys.readouterr().out

    def test_end_of_input_exits(self, settings: Settings) -> None:
        """Test a closed stdin at the menu."""
        with patch("builtins.input", side_effect=EOFError):
            assert main([], settings=settings) == 0

    def test_unconfigured_endpoint(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test running without configuration."""
        with patch.dict(os.environ, {}, clear=True):
            assert main(["1", "--no-wait"]) == 0

        assert MISSING_CONFIG_MESSAGE in capsys.readouterr().out

    def test_invalid_configuration(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that invalid settings end with status 1."""
        with patch.dict(os.environ, {"CHAT_SAMPLES_LOG_LEVEL": "LOUD"}, clear=True):
            assert main(["1", "--no-wait"]) == 1

        assert "Invalid configuration" in capsys.readouterr().out

    def test_logging_configured(self, settings: Settings, no_logging_setup: MagicMock) -> None:
        """Test that logging is set up from the loaded settings."""
        main(["11", "--no-wait"], settings=settings)
        no_logging_setup.assert_called_once_with(settings)
