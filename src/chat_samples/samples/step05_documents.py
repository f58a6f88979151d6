"""Step 05: document analysis and search.

Analyzes the Hamlet summary resource (or an inline text when it is
missing), then answers a query over ``countries.json``. Documents are cut
to the deployment's context budget before they are sent.
"""

from chat_samples.chat.history import ChatHistory
from chat_samples.core.errors import ChatSamplesError
from chat_samples.core.logging import get_logger
from chat_samples.samples.base import SEPARATOR, SampleContext, print_banner
from chat_samples.utils.tokens import fit_to_context

logger = get_logger(__name__)

TITLE = "Step 05: File Search and Document Analysis"

DOCUMENT = "Hamlet_full_play_summary.txt"
DATA_FILE = "countries.json"
SEARCH_QUERY = "Find countries in Europe with population over 50 million"

FALLBACK_TEXT = (
    "The Great Gatsby is a 1925 novel by American writer F. Scott Fitzgerald. Set in the Jazz Age on "
    "prosperous Long Island and in New York City, the novel tells the first-person story of Nick Carraway, "
    "a young Midwesterner who moves to Long Island in 1922, intending to work in the bond business. There "
    "he befriends his mysterious neighbor, Jay Gatsby. The novel was inspired by a youthful romance "
    "Fitzgerald had with socialite Ginevra King, and the riotous parties he attended on Long Island's North "
    "Shore in 1922. Following a move to the French Riviera, Fitzgerald completed a rough draft in 1924. He "
    "submitted it to editor Maxwell Perkins, who persuaded Fitzgerald to revise the work over the following "
    "winter. After making revisions, Fitzgerald was satisfied with the text, but remained ambivalent about "
    "the book's title and considered several alternatives."
)


def _fit(context: SampleContext, text: str) -> str:
    fitted = fit_to_context(
        text,
        model=context.config.chat_model_id,
        max_output_tokens=context.settings.default_max_tokens,
    )
    if fitted != text:
        logger.info("document_truncated", original_chars=len(text), sent_chars=len(fitted))
    return fitted


def analyze_sample_text(context: SampleContext) -> None:
    service = context.chat_service()
    history = ChatHistory(
        "You are a literary analysis expert. "
        "Analyze text and provide insights about themes, characters, and literary significance."
    )

    print("[User]: Analyzing sample text about The Great Gatsby...")
    history.add_user_message(
        "Analyze this text about The Great Gatsby and discuss its historical context "
        f"and literary significance:\n\n{FALLBACK_TEXT}"
    )
    print(f"[Assistant]: {service.get_response(history)}")
    print()


def analyze_text_document(context: SampleContext) -> None:
    print("=== Document Analysis ===")
    if not context.resources.exists(DOCUMENT):
        print(f"Document not found at {context.resources.path(DOCUMENT)}. Using sample text instead.")
        analyze_sample_text(context)
        return

    document = _fit(context, context.resources.read_text(DOCUMENT))
    service = context.chat_service()
    history = ChatHistory(
        "You are a literary analysis expert. "
        "Analyze documents and provide insights about their content, themes, and structure."
    )

    print("[User]: Analyzing document for key themes and characters...")
    history.add_user_message(
        "Analyze this document and identify the main themes, key characters, "
        f"and provide a brief summary:\n\n{document}"
    )
    print(f"[Assistant]: {service.get_response(history)}")
    print()


def search_in_document(context: SampleContext) -> None:
    print("=== Document Search ===")
    if not context.resources.exists(DATA_FILE):
        print(f"JSON document not found at {context.resources.path(DATA_FILE)}. Skipping search example.")
        return

    data = _fit(context, context.resources.read_text(DATA_FILE))
    service = context.chat_service()
    history = ChatHistory(
        "You are a data search assistant. Search through provided data and answer questions about it."
    )

    print(f"[User]: {SEARCH_QUERY}")
    history.add_user_message(f"Search this data and answer: {SEARCH_QUERY}\n\nData:\n{data}")
    print(f"[Assistant]: {service.get_response(history)}")
    print()


def run(context: SampleContext) -> None:
    """Analyze a document, then search a JSON data file."""
    print_banner(TITLE)

    try:
        analyze_text_document(context)
        print(SEPARATOR)
        search_in_document(context)
    except ChatSamplesError as e:
        logger.warning("sample_failed", error=str(e))
        print(f"Error: {e.message}")
