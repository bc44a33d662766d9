"""Structured logging configuration using structlog.

Modules log through the stdlib ``logging.getLogger(__name__)``; structlog's
ProcessorFormatter renders those records together with whatever request
context is bound (trace id, Svix message id, Clerk event type).
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

_QUIET_LOGGERS = ("uvicorn.access", "httpx")


def _shared_processors(json_output: bool) -> list:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        # Console renderer formats tracebacks itself; JSON needs them as a field.
        processors.append(structlog.processors.format_exc_info)
    return processors


def configure_logging(log_level: str = "info", json_output: bool = False) -> None:
    """Configure structlog over the stdlib root logger.

    Args:
        log_level: Logging level string (debug/info/warning/error).
        json_output: If True, output JSON (production). If False, colored console (local mode).
    """
    shared = _shared_processors(json_output)
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            foreign_pre_chain=shared,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def bind_request_context(
    trace_id: str | None = None,
    path: str | None = None,
    message_id: str | None = None,
    event_type: str | None = None,
) -> None:
    """Bind the given request fields to the current async context; None values are skipped."""
    ctx = {
        "trace_id": trace_id,
        "path": path,
        "message_id": message_id,
        "event_type": event_type,
    }
    structlog.contextvars.bind_contextvars(**{k: v for k, v in ctx.items() if v is not None})


@contextmanager
def delivery_context(message_id: str) -> Iterator[None]:
    """Bind the Svix message id for one delivery and unbind delivery fields afterwards."""
    bind_request_context(message_id=message_id)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars("message_id", "event_type")


def clear_request_context() -> None:
    """Clear bound context variables after a request."""
    structlog.contextvars.clear_contextvars()
