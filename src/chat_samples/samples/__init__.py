"""The sample gallery.

Samples are numbered 1-10 and run independently. Each takes a
``SampleContext`` and prints its conversation to stdout.
"""

from collections.abc import Callable
from dataclasses import dataclass

from chat_samples.samples import (
    step01_story,
    step02_plugins,
    step03_vision,
    step04_code,
    step05_documents,
    step06_openapi,
    step07_functions,
    step08_declarative,
    step09_grounding,
    step10_json_response,
)
from chat_samples.samples.base import SampleContext


@dataclass(frozen=True)
class Sample:
    number: int
    title: str
    run: Callable[[SampleContext], None]


SAMPLES: tuple[Sample, ...] = (
    Sample(1, "Azure OpenAI Chat Completion with Story Generation", step01_story.run),
    Sample(2, "Azure OpenAI with Plugins", step02_plugins.run),
    Sample(3, "Azure OpenAI with Vision", step03_vision.run),
    Sample(4, "Azure OpenAI Code Analysis and Generation", step04_code.run),
    Sample(5, "Azure OpenAI File Search and Document Analysis", step05_documents.run),
    Sample(6, "Azure OpenAI OpenAPI Integration", step06_openapi.run),
    Sample(7, "Azure OpenAI Custom Functions", step07_functions.run),
    Sample(8, "Azure OpenAI Declarative Patterns", step08_declarative.run),
    Sample(9, "Azure OpenAI Search Grounding Concepts", step09_grounding.run),
    Sample(10, "Azure OpenAI JSON Response Formatting", step10_json_response.run),
)


def get_sample(number: int) -> Sample | None:
    """Look up a sample by its menu number."""
    return next((sample for sample in SAMPLES if sample.number == number), None)


__all__ = ["SAMPLES", "Sample", "SampleContext", "get_sample"]
