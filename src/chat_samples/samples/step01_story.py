"""Step 01: chat completion with story generation.

Loads a declarative prompt from ``GenerateStory.yaml`` and invokes it
twice, first with the document's default arguments and then with overrides.
"""

from chat_samples.core.errors import ChatSamplesError
from chat_samples.core.logging import get_logger
from chat_samples.functions.plugin import PromptFunction
from chat_samples.prompts.loader import load_prompt_resource
from chat_samples.samples.base import SampleContext, print_banner

logger = get_logger(__name__)

TITLE = "Step 01: Azure OpenAI Chat Completion with Story Generation"


def run(context: SampleContext) -> None:
    """Generate two stories from the YAML prompt."""
    print_banner(TITLE)

    try:
        config = load_prompt_resource("GenerateStory.yaml", context.resources)
        print(f"Using template: {config.template}")
        print()

        story = PromptFunction.from_config(config)
        service = context.chat_service()
        defaults = config.default_arguments()

        print(
            "Generating story with default arguments "
            f"(topic: {defaults.get('topic')}, length: {defaults.get('length')}):"
        )
        print(f"Generated Story: {service.invoke(story)}")

        print()
        print("Generating story with override arguments (topic: Cat, length: 5):")
        print(f"Generated Story: {service.invoke(story, {'topic': 'Cat', 'length': '5'})}")
    except ChatSamplesError as e:
        logger.warning("sample_failed", error=str(e))
        print(f"Error: {e.message}")
