"""Step 02: chat completion with plugins.

Three conversations with automatic tool calling: a restaurant host backed
by the menu plugin, a widget factory, and a prompt function exposed as a
tool.
"""

from chat_samples.chat.history import ChatHistory
from chat_samples.core.errors import ChatSamplesError
from chat_samples.core.logging import get_logger
from chat_samples.functions.plugin import Plugin, PromptFunction
from chat_samples.samples.base import SEPARATOR, SampleContext, print_banner, print_reply, print_user
from chat_samples.samples.plugins import MenuPlugin, WidgetFactory

logger = get_logger(__name__)

TITLE = "Step 02: Azure OpenAI with Plugins"

MENU_QUESTIONS = [
    "Hello",
    "What is the special soup and its price?",
    "What is the special drink and its price?",
    "Thank you",
]

VOWEL_TEMPLATE = """Count the number of vowels in INPUT and report as a markdown table.

INPUT:
{{$input}}"""


def use_menu_plugin(context: SampleContext) -> None:
    print("=== Using Menu Plugin ===")
    service = context.chat_service([Plugin.from_object(MenuPlugin())])
    history = ChatHistory(
        "You are a helpful restaurant host. Answer questions about the menu using the available functions."
    )

    for question in MENU_QUESTIONS:
        history.add_user_message(question)
        print_user(question)
        answer = service.get_response(history)
        history.add_assistant_message(answer)
        print_reply(answer)


def use_widget_factory(context: SampleContext) -> None:
    print("=== Using Widget Factory Plugin ===")
    service = context.chat_service([Plugin.from_object(WidgetFactory())])
    history = ChatHistory(
        "You are a helpful widget factory assistant. "
        "Create widgets based on user requests using the available functions."
    )

    request = "Create a beautiful red colored widget for me."
    history.add_user_message(request)
    print_user(request)
    print_reply(service.get_response(history))


def use_prompt_function(context: SampleContext) -> None:
    print("=== Using Custom Prompt Function ===")
    vowels = PromptFunction(VOWEL_TEMPLATE, name="count_vowels", description="Counts the number of vowels")
    service = context.chat_service([Plugin.from_functions("VowelPlugin", [vowels])])
    history = ChatHistory(
        "You are a text analysis assistant. Analyze text using the available vowel counting function."
    )

    text = "Who would know naught of art must learn, act, and then take his ease."
    history.add_user_message(text)
    print_user(text)
    print_reply(service.get_response(history))


def run(context: SampleContext) -> None:
    """Run the three plugin conversations."""
    print_banner(TITLE)

    try:
        use_menu_plugin(context)
        print(SEPARATOR)
        use_widget_factory(context)
        print(SEPARATOR)
        use_prompt_function(context)
    except ChatSamplesError as e:
        logger.warning("sample_failed", error=str(e))
        print(f"Error: {e.message}")
