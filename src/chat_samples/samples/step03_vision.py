"""Step 03: vision.

Describes an image referenced by URL, then looks for animals in the local
``cat.jpg`` resource sent inline as a base64 data URI.
"""

from chat_samples.chat.history import ChatHistory
from chat_samples.core.errors import ChatSamplesError
from chat_samples.core.logging import get_logger
from chat_samples.providers.base import ImagePart
from chat_samples.samples.base import SEPARATOR, SampleContext, print_banner

logger = get_logger(__name__)

TITLE = "Step 03: Azure OpenAI Vision Capabilities"

IMAGE_URL = (
    "https://upload.wikimedia.org/wikipedia/commons/thumb/4/47/"
    "New_york_times_square-terabass.jpg/800px-New_york_times_square-terabass.jpg"
)
LOCAL_IMAGE = "cat.jpg"


def analyze_image_from_url(context: SampleContext) -> None:
    print("=== Analyzing Image from URL ===")
    service = context.chat_service()
    history = ChatHistory(
        "You are a helpful AI assistant that can analyze images. Describe what you see in detail."
    )
    history.add_user_message("Describe this image in detail.", images=[ImagePart(IMAGE_URL)])

    print(f"[User]: Analyzing image from URL: {IMAGE_URL}")
    print(f"[Assistant]: {service.get_response(history)}")
    print()


def analyze_local_image(context: SampleContext) -> None:
    print("=== Analyzing Local Image ===")
    if not context.resources.exists(LOCAL_IMAGE):
        print(f"Local image not found at {context.resources.path(LOCAL_IMAGE)}. Skipping local image analysis.")
        return

    service = context.chat_service()
    history = ChatHistory(
        "You are a helpful AI assistant that can analyze images. Look for animals and describe them."
    )
    data_uri = context.resources.data_uri(LOCAL_IMAGE)
    logger.info("local_image_loaded", size_kb=len(data_uri) // 1024)
    history.add_user_message(
        "Is there an animal in this image? If so, describe it.",
        images=[ImagePart(data_uri)],
    )

    print("[User]: Analyzing local image for animals...")
    print(f"[Assistant]: {service.get_response(history)}")
    print()


def run(context: SampleContext) -> None:
    """Analyze a remote and a local image."""
    print_banner(TITLE)

    try:
        analyze_image_from_url(context)
        print(SEPARATOR)
        analyze_local_image(context)
    except ChatSamplesError as e:
        logger.warning("sample_failed", error=str(e))
        print(f"Error: {e.message}")
