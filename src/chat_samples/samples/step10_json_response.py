"""Step 10: JSON response formatting.

Scores three inputs for creativity with JSON mode on, parsing each reply
into ``CreativityScore``, then prints one structured evaluation field by
field. A reply that does not parse is reported and the sample moves on.
"""

from chat_samples.chat.history import ChatHistory
from chat_samples.core.errors import ChatSamplesError, ResponseParseError
from chat_samples.core.logging import get_logger
from chat_samples.samples.base import SEPARATOR, SampleContext, print_banner
from chat_samples.utils.structured import CreativityScore, parse_model

logger = get_logger(__name__)

TITLE = "Step 10: JSON Response Formatting"

TUTOR_INSTRUCTIONS = """Think step-by-step and rate the user input on creativity and expressiveness from 1-100.

Respond in JSON format with the following JSON schema:

{
    "score": "integer (1-100)",
    "notes": "the reason for your score"
}"""

EVALUATOR_INSTRUCTIONS = """You are a creative writing evaluator. Rate the creativity and expressiveness of text samples.
Always respond with a JSON object containing a score (1-100) and detailed notes explaining your reasoning."""

TEST_INPUTS = [
    "The quick brown fox jumps over the lazy dog.",
    "In a world where gravity flows upward, the tears of joy fall toward heaven, "
    "creating rainbow bridges that connect the hearts of lonely stars.",
    "I like pizza.",
]

CREATIVE_INPUT = (
    "The clockwork butterfly emerged from its chrysalis of gears and springs, spreading wings that chimed "
    "like silver bells in the morning light of a steampunk dawn."
)


def use_json_object_response(context: SampleContext) -> None:
    print("=== Using JSON Object Response ===")
    service = context.chat_service()
    history = ChatHistory(TUTOR_INSTRUCTIONS)

    for text in TEST_INPUTS:
        print(f"[User]: {text}")
        history.add_user_message(text)
        content = service.get_response(history, json_mode=True)
        print(f"[Assistant]: {content}")

        try:
            score = parse_model(content, CreativityScore)
            print(f"Parsed Score: {score.score}, Notes: {score.notes}")
        except ResponseParseError as e:
            logger.info("json_parse_failed", error=e.message)
            print("Failed to parse JSON response")

        print()
        history.clear()
        history.add_system_message(TUTOR_INSTRUCTIONS)


def use_structured_json_response(context: SampleContext) -> None:
    print("=== Using Structured JSON Response with Schema ===")
    service = context.chat_service()
    history = ChatHistory(EVALUATOR_INSTRUCTIONS)

    print(f"[User]: {CREATIVE_INPUT}")
    history.add_user_message(f"Rate this text for creativity and expressiveness: {CREATIVE_INPUT}")
    content = service.get_response(history, json_mode=True)
    print(f"[Assistant]: {content}")

    try:
        score = parse_model(content, CreativityScore)
        print("\nStructured Response:")
        print(f"  Score: {score.score}/100")
        print(f"  Notes: {score.notes}")
    except ResponseParseError as e:
        print(f"Failed to parse structured JSON: {e.message}")

    print()


def run(context: SampleContext) -> None:
    """Score inputs in JSON mode and parse the results."""
    print_banner(TITLE)

    try:
        use_json_object_response(context)
        print(SEPARATOR)
        use_structured_json_response(context)
    except ChatSamplesError as e:
        logger.warning("sample_failed", error=str(e))
        print(f"Error: {e.message}")
