"""Step 09: grounding and fact-checking prompts.

No search backend is involved; the system prompts steer the model to flag
time-sensitive answers and to point at sources.
"""

from chat_samples.chat.history import ChatHistory
from chat_samples.core.errors import ChatSamplesError
from chat_samples.core.logging import get_logger
from chat_samples.samples.base import SEPARATOR, SampleContext, print_banner, print_reply, print_user

logger = get_logger(__name__)

TITLE = "Step 09: Search Grounding Concepts"

GROUNDED_INSTRUCTIONS = """You are an AI assistant that provides information based on reliable sources.
When answering questions, acknowledge when information might be time-sensitive or when you should recommend checking current sources.
Always be transparent about the limitations of your knowledge cutoff."""

FACT_CHECK_INSTRUCTIONS = """You are a fact-checking assistant. When presented with claims or statements:
1. Identify the key factual claims
2. Assess their verifiability
3. Suggest reliable sources for verification
4. Note any potential biases or context needed
Always recommend consulting primary sources and multiple viewpoints for important decisions."""

QUESTIONS = [
    "What are the current stock prices for major tech companies?",
    "What's the weather like today in Seattle?",
    "What are the latest developments in artificial intelligence?",
]

CLAIM = (
    "Studies show that drinking 8 glasses of water per day is essential for optimal health "
    "and is recommended by all major health organizations."
)
FOLLOW_UP = "What sources would you recommend for verifying health claims like this?"


def simulate_grounded_response(context: SampleContext) -> None:
    print("=== Simulated Grounded Response ===")
    service = context.chat_service()
    history = ChatHistory(GROUNDED_INSTRUCTIONS)

    for question in QUESTIONS:
        history.add_user_message(question)
        print_user(question)
        answer = service.get_response(history)
        history.add_assistant_message(answer)
        print_reply(answer)


def demonstrate_fact_checking(context: SampleContext) -> None:
    print("=== Fact-Checking and Source Verification ===")
    service = context.chat_service()
    history = ChatHistory(FACT_CHECK_INSTRUCTIONS)

    history.add_user_message(f"Please analyze and fact-check this claim: {CLAIM}")
    print_user(f"Please fact-check this claim: {CLAIM}")
    answer = service.get_response(history)
    history.add_assistant_message(answer)
    print_reply(answer)

    history.add_user_message(FOLLOW_UP)
    print_user(FOLLOW_UP)
    print_reply(service.get_response(history))


def run(context: SampleContext) -> None:
    """Ask time-sensitive questions, then fact-check a claim."""
    print_banner(TITLE)

    try:
        simulate_grounded_response(context)
        print(SEPARATOR)
        demonstrate_fact_checking(context)
    except ChatSamplesError as e:
        logger.warning("sample_failed", error=str(e))
        print(f"Error: {e.message}")
