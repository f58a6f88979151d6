"""Step 07: custom functions.

The math plugin answers three questions in one conversation; a text plugin
of prompt functions summarizes a paragraph on request.
"""

from chat_samples.chat.history import ChatHistory
from chat_samples.core.errors import ChatSamplesError
from chat_samples.core.logging import get_logger
from chat_samples.functions.plugin import Plugin, PromptFunction
from chat_samples.samples.base import SEPARATOR, SampleContext, print_banner, print_reply, print_user
from chat_samples.samples.plugins import MathPlugin

logger = get_logger(__name__)

TITLE = "Step 07: Custom Functions"

MATH_QUESTIONS = [
    "What is the square root of 144?",
    "Calculate the factorial of 5",
    "Is 17 a prime number?",
]

LONG_TEXT = (
    "Artificial Intelligence (AI) has become one of the most transformative technologies of the 21st "
    "century. It encompasses various techniques including machine learning, deep learning, and natural "
    "language processing. AI systems can now perform tasks that were once thought to be exclusively human, "
    "such as recognizing images, understanding speech, and making complex decisions. The applications of "
    "AI span across numerous industries including healthcare, finance, transportation, and entertainment."
)


def text_plugin() -> Plugin:
    summarize = PromptFunction(
        "Summarize the following text in 2-3 sentences:\n\n{{$input}}",
        name="summarize",
        description="Summarizes text to 2-3 sentences",
    )
    translate = PromptFunction(
        "Translate the following text to {{$language}}:\n\n{{$input}}",
        name="translate",
        description="Translates text to specified language",
    )
    return Plugin.from_functions("TextPlugin", [summarize, translate])


def use_math_functions(context: SampleContext) -> None:
    print("=== Using Custom Math Functions ===")
    service = context.chat_service([Plugin.from_object(MathPlugin())])
    history = ChatHistory(
        "You are a math tutor. Use the available math functions to solve problems and explain the results."
    )

    for question in MATH_QUESTIONS:
        history.add_user_message(question)
        print_user(question)
        answer = service.get_response(history)
        history.add_assistant_message(answer)
        print_reply(answer)


def use_prompt_functions(context: SampleContext) -> None:
    print("=== Using Custom Prompt Functions ===")
    service = context.chat_service([text_plugin()])
    history = ChatHistory(
        "You are a text processing assistant. Use the available text functions to help users with text tasks."
    )

    history.add_user_message(f"Please summarize this text: {LONG_TEXT}")
    print_user("Summarize this text about AI")
    print_reply(service.get_response(history))


def run(context: SampleContext) -> None:
    """Run the math and text plugin conversations."""
    print_banner(TITLE)

    try:
        use_math_functions(context)
        print(SEPARATOR)
        use_prompt_functions(context)
    except ChatSamplesError as e:
        logger.warning("sample_failed", error=str(e))
        print(f"Error: {e.message}")
