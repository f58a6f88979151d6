"""Step 08: declarative prompt templates.

Renders an email and a summary template with bound arguments, then chains
two templates: the analysis produced by the first becomes an argument of
the second.
"""

from chat_samples.core.errors import ChatSamplesError
from chat_samples.core.logging import get_logger
from chat_samples.functions.plugin import PromptFunction
from chat_samples.samples.base import SEPARATOR, SampleContext, print_banner

logger = get_logger(__name__)

TITLE = "Step 08: Declarative AI Patterns"

EMAIL_TEMPLATE = """You are a professional email assistant.

Write a {{$tone}} email with the following details:
- To: {{$recipient}}
- Subject: {{$subject}}
- Main message: {{$message}}

Make it professional, clear, and appropriate for business communication."""

SUMMARY_TEMPLATE = """You are a content summarizer.

Create a {{$length}} summary of the following content:
{{$content}}

Focus on the key points and main takeaways."""

ANALYZE_TEMPLATE = """Analyze the following text and identify:
1. Main topic
2. Key themes
3. Sentiment (positive/negative/neutral)
4. Target audience

Text: {{$input}}"""

IMPROVE_TEMPLATE = """Based on this analysis:
{{$analysis}}

Suggest 3 specific improvements for the original text:
{{$original}}"""

CLOUD_CONTENT = (
    "Cloud computing represents a paradigm shift in how organizations access and manage their IT "
    "resources. Instead of maintaining physical servers and infrastructure on-premises, companies can "
    "leverage cloud services provided by major platforms like Amazon Web Services, Microsoft Azure, and "
    "Google Cloud Platform. This approach offers numerous benefits including cost savings through "
    "pay-as-you-use models, enhanced scalability to handle varying workloads, improved accessibility "
    "allowing remote work capabilities, and robust security features managed by cloud providers. However, "
    "organizations must also consider challenges such as potential vendor lock-in, data privacy concerns, "
    "and the need for reliable internet connectivity."
)

PRODUCT_TEXT = (
    "Our new product is okay and might be useful for some people. It has features that work fine and the "
    "price is reasonable. Maybe you should consider buying it if you need something like this."
)


def use_declarative_prompts(context: SampleContext) -> None:
    print("=== Declarative Prompt Templates ===")
    service = context.chat_service()

    email = PromptFunction(EMAIL_TEMPLATE, name="write_email")
    email_args = {
        "tone": "formal",
        "recipient": "John Smith",
        "subject": "Project Update",
        "message": "The quarterly project review has been completed and we're on track to meet our deadlines.",
    }
    print("[User]: Generate a formal email about project update")
    print(f"[Assistant]: {service.invoke(email, email_args)}")
    print()

    summary = PromptFunction(SUMMARY_TEMPLATE, name="summarize")
    print("[User]: Create a brief summary of cloud computing content")
    print(f"[Assistant]: {service.invoke(summary, {'length': 'brief', 'content': CLOUD_CONTENT})}")
    print()


def use_template_workflow(context: SampleContext) -> None:
    print("=== Template-Based Workflow ===")
    service = context.chat_service()

    analyze = PromptFunction(ANALYZE_TEMPLATE, name="analyze")
    print("[User]: Analyze this product description")
    analysis = service.invoke(analyze, {"input": PRODUCT_TEXT})
    print(f"[Assistant - Analysis]: {analysis}")
    print()

    improve = PromptFunction(IMPROVE_TEMPLATE, name="improve")
    print("[User]: Suggest improvements based on the analysis")
    improvements = service.invoke(improve, {"analysis": analysis, "original": PRODUCT_TEXT})
    print(f"[Assistant - Improvements]: {improvements}")
    print()


def run(context: SampleContext) -> None:
    """Run the template samples and the two-step workflow."""
    print_banner(TITLE)

    try:
        use_declarative_prompts(context)
        print(SEPARATOR)
        use_template_workflow(context)
    except ChatSamplesError as e:
        logger.warning("sample_failed", error=str(e))
        print(f"Error: {e.message}")
