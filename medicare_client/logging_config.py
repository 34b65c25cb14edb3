"""Structured logging for the client.

JSON log lines via structlog over the standard library. Every HTTP call
binds its request id (also sent as X-Request-ID) so that service, store
and transport events for one call can be correlated.
"""
import logging
import sys
import uuid
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

import structlog


def setup_structured_logging(log_level: str = "INFO", stream: Optional[TextIO] = None):
    """
    Configure structlog and the root stdlib logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        stream: Output stream (default: stdout)
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=getattr(logging, log_level.upper()),
        force=True
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger for a module (pass __name__)."""
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Generate unique request ID."""
    return f"req-{uuid.uuid4().hex[:12]}"


@contextmanager
def request_context(request_id: str, **fields) -> Iterator[str]:
    """
    Bind `request_id` (plus any extra fields) to every log event emitted
    inside the block, on this thread only.

    Example:
        with request_context(generate_request_id(), method="GET"):
            logger.info("http_request")  # carries request_id and method
    """
    with structlog.contextvars.bound_contextvars(request_id=request_id, **fields):
        yield request_id
