"""Structured logging configuration using structlog.

Sample output goes to stdout; log events go to stderr so the two never
interleave in a captured transcript. JSON rendering is available for
machine-readable runs, a colored console renderer for interactive ones.
"""

import logging
import sys
from typing import Any, cast

import structlog

from chat_samples.core.config import Settings, get_settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structured logging.

    Call this once at startup, after settings are loaded.

    Args:
        settings: Resolved settings. Defaults to the cached settings.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
    # The OpenAI SDK logs every HTTP request at INFO through httpx.
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))

    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "json":
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=cast(list[structlog.typing.Processor], processors),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a configured logger instance.

    Args:
        name: Optional logger name for identification.

    Returns:
        A bound logger instance.
    """
    return structlog.get_logger(name)


class LogContext:
    """Context manager for adding temporary log context.

    Example:
        with LogContext(sample=3):
            logger.info("sample_started")
    """

    def __init__(self, **kwargs: Any) -> None:
        self.context = kwargs

    def __enter__(self) -> "LogContext":
        structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.unbind_contextvars(*self.context.keys())


def log_llm_call(
    logger: Any,
    provider: str,
    model: str,
    input_tokens: int | None = None,
    output_tokens: int | None = None,
    latency_ms: float | None = None,
    **kwargs: Any,
) -> None:
    """Log a chat completion call with standard metrics.

    Args:
        logger: The logger instance to use.
        provider: The provider name (e.g., "azure_openai").
        model: The model or deployment name used.
        input_tokens: Number of prompt tokens (if reported).
        output_tokens: Number of completion tokens (if reported).
        latency_ms: Request latency in milliseconds.
        **kwargs: Additional context to log.
    """
    total_tokens = None
    if input_tokens is not None or output_tokens is not None:
        total_tokens = (input_tokens or 0) + (output_tokens or 0)
    logger.info(
        "llm_call",
        provider=provider,
        model=model,
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        total_tokens=total_tokens,
        latency_ms=round(latency_ms, 1) if latency_ms is not None else None,
        **kwargs,
    )
