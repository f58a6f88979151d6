"""Console entry point for the sample gallery.

Usage:
    chat-samples          # show the menu and pick a sample
    chat-samples 3        # run sample 3 directly
    chat-samples --list   # print the menu and exit

Configuration is loaded once here and handed to the selected sample.
"""

import argparse
import sys

from pydantic import ValidationError

from chat_samples import __version__
from chat_samples.core.config import Settings, get_settings
from chat_samples.core.errors import ConfigurationError
from chat_samples.core.logging import LogContext, get_logger, setup_logging
from chat_samples.samples import SAMPLES, SampleContext, get_sample

logger = get_logger(__name__)

HEADER = "Azure OpenAI Samples"
INVALID_SELECTION = f"Invalid sample number. Please choose 1-{len(SAMPLES)}."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chat-samples",
        description="Run chat completion samples against an Azure OpenAI deployment.",
    )
    parser.add_argument("sample", nargs="?", help=f"sample number to run (1-{len(SAMPLES)})")
    parser.add_argument("--list", action="store_true", help="list the samples and exit")
    parser.add_argument("--no-wait", action="store_true", help="exit without waiting for Enter")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def print_menu() -> None:
    print("Available samples:")
    for sample in SAMPLES:
        print(f"{sample.number}. Step {sample.number:02d} - {sample.title}")
    print()


def read_line(prompt: str) -> str:
    """Read one line of input; end of input counts as an empty line."""
    try:
        return input(prompt)
    except EOFError:
        return ""


def parse_selection(value: str) -> int | None:
    try:
        return int(value.strip())
    except ValueError:
        return None


def run_sample(number: int | None, context: SampleContext) -> bool:
    """Run one sample, containing every failure to this call.

    Returns:
        True if the sample was started.
    """
    sample = get_sample(number) if number is not None else None
    if sample is None:
        print(INVALID_SELECTION)
        return False

    try:
        context.config.ensure_configured()
    except ConfigurationError as e:
        logger.warning("configuration_missing", **e.details)
        print(e.message)
        return False

    with LogContext(sample=sample.number):
        logger.info("sample_started", title=sample.title)
        try:
            sample.run(context)
        except Exception as e:
            logger.exception("sample_crashed")
            print(f"Error running sample: {e}")
        logger.info("sample_finished")
    return True


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Run the gallery.

    Args:
        argv: Command line arguments, without the program name.
        settings: Pre-loaded settings; loaded from the environment if omitted.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)

    print(HEADER)
    print("=" * len(HEADER))
    print()

    if args.list:
        print_menu()
        return 0

    if settings is None:
        try:
            settings = get_settings()
        except ValidationError as e:
            print(f"Invalid configuration: {e}")
            return 1
    setup_logging(settings)
    context = SampleContext.from_settings(settings)

    if args.sample is not None:
        number = parse_selection(args.sample)
    else:
        print_menu()
        choice = read_line(f"Select a sample (1-{len(SAMPLES)}) or press Enter to exit: ")
        if not choice.strip():
            return 0
        number = parse_selection(choice)

    run_sample(number, context)

    if not args.no_wait:
        print()
        read_line("Press Enter to exit...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
