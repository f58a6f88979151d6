"""Step 04: code analysis and generation."""

from chat_samples.chat.history import ChatHistory
from chat_samples.core.errors import ChatSamplesError
from chat_samples.core.logging import get_logger
from chat_samples.samples.base import SEPARATOR, SampleContext, print_banner

logger = get_logger(__name__)

TITLE = "Step 04: Code Analysis and Generation"

SAMPLE_CODE = """def fibonacci(n):
    if n <= 1:
        return n
    else:
        return fibonacci(n-1) + fibonacci(n-2)

for i in range(10):
    print(f"F({i}) = {fibonacci(i)}")"""

REQUIREMENT = "Create a Python function that calculates the area of different shapes (circle, rectangle, triangle)"


def analyze_code(context: SampleContext) -> None:
    print("=== Code Analysis ===")
    service = context.chat_service()
    history = ChatHistory(
        "You are a code analysis expert. Analyze code for bugs, improvements, and explain what it does."
    )

    print(f"[User]: Analyze this Python code:\n{SAMPLE_CODE}")
    history.add_user_message(
        f"Analyze this Python code for efficiency and suggest improvements:\n\n```python\n{SAMPLE_CODE}\n```"
    )
    print(f"[Assistant]: {service.get_response(history)}")
    print()


def generate_code(context: SampleContext) -> None:
    print("=== Code Generation ===")
    service = context.chat_service()
    history = ChatHistory(
        "You are a programming assistant. Generate clean, well-documented code based on requirements."
    )

    print(f"[User]: {REQUIREMENT}")
    history.add_user_message(REQUIREMENT)
    print(f"[Assistant]: {service.get_response(history)}")
    print()


def run(context: SampleContext) -> None:
    """Analyze a snippet, then generate code from a requirement."""
    print_banner(TITLE)

    try:
        analyze_code(context)
        print(SEPARATOR)
        generate_code(context)
    except ChatSamplesError as e:
        logger.warning("sample_failed", error=str(e))
        print(f"Error: {e.message}")
