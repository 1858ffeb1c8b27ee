"""Structured logging configuration using structlog.

This module provides:
- JSON logging for machine-readable output
- Pretty console logging for development
- Automatic context enrichment (timestamps, bound lab id)

Classroom narration is printed by ``llm_labs.console``; this module carries
the diagnostic events (API calls, skipped tool calls) alongside it.
"""

import logging
import sys
from typing import Any, cast

import structlog

from llm_labs.core.config import get_settings


def setup_logging() -> None:
    """Configure structured logging based on settings.

    Call this once at application startup to configure logging.
    """
    settings = get_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.log_level),
    )

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
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=cast(list[structlog.typing.Processor], processors),
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, settings.log_level)),
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
        with LogContext(lab="tool-calls"):
            logger.info("lab_started")
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
    prompt_tokens: int | None = None,
    completion_tokens: int | None = None,
    total_tokens: int | None = None,
    latency_ms: float | None = None,
    **kwargs: Any,
) -> None:
    """Log a chat-completion call with its reported usage.

    Args:
        logger: The logger instance to use.
        provider: The provider name (e.g., "openai").
        model: The model name used.
        prompt_tokens: Prompt tokens reported by the provider, if any.
        completion_tokens: Completion tokens reported by the provider, if any.
        total_tokens: Total tokens reported by the provider, if any.
        latency_ms: Request latency in milliseconds.
        **kwargs: Additional context to log.
    """
    logger.info(
        "llm_call",
        provider=provider,
        model=model,
        prompt_tokens=prompt_tokens,
        completion_tokens=completion_tokens,
        total_tokens=total_tokens,
        latency_ms=latency_ms,
        **kwargs,
    )
