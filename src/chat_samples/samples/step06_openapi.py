"""Step 06: OpenAPI design and endpoint analysis."""

from chat_samples.chat.history import ChatHistory
from chat_samples.core.errors import ChatSamplesError
from chat_samples.core.logging import get_logger
from chat_samples.samples.base import SEPARATOR, SampleContext, print_banner

logger = get_logger(__name__)

TITLE = "Step 06: OpenAPI Integration Concepts"

API_REQUEST = (
    "Create an OpenAPI specification for a simple user management API "
    "with endpoints for creating, reading, updating, and deleting users"
)
API_ENDPOINT = "POST /api/users - Creates a new user with fields: name (string), email (string), age (number)"


def generate_openapi_spec(context: SampleContext) -> None:
    print("=== Generate OpenAPI Specification ===")
    service = context.chat_service()
    history = ChatHistory("You are an API design expert. Generate OpenAPI specifications for web services.")

    print(f"[User]: {API_REQUEST}")
    history.add_user_message(API_REQUEST)
    print(f"[Assistant]: {service.get_response(history)}")
    print()


def analyze_api_endpoint(context: SampleContext) -> None:
    print("=== Analyze API Endpoint ===")
    service = context.chat_service()
    history = ChatHistory(
        "You are an API analysis expert. Analyze API endpoints and provide documentation and usage examples."
    )

    print(f"[User]: Analyze this API endpoint: {API_ENDPOINT}")
    history.add_user_message(
        "Analyze this API endpoint and provide example requests, responses, "
        f"and potential error scenarios: {API_ENDPOINT}"
    )
    print(f"[Assistant]: {service.get_response(history)}")
    print()


def run(context: SampleContext) -> None:
    """Generate an API description, then analyze one endpoint."""
    print_banner(TITLE)

    try:
        generate_openapi_spec(context)
        print(SEPARATOR)
        analyze_api_endpoint(context)
    except ChatSamplesError as e:
        logger.warning("sample_failed", error=str(e))
        print(f"Error: {e.message}")
