"""Request ID logging context for tracing API calls across modules.

The API middleware sets a correlation ID per HTTP request. ``load_config``
installs ``RequestIdFilter`` on the root handlers, so every record that
reaches them, whether from a route, a store, the recommendation engine or
the outreach generator, carries ``request_id`` and the log format prints it.
Service and router modules also attach it to their own loggers through
``get_request_logger``.

Usage:
    from salonassist.logging_context import get_request_logger, set_request_id

    set_request_id("REQ-abc123")
    logger = get_request_logger(__name__)
    logger.info("Generating suggestions")  # record.request_id == "REQ-abc123"
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Iterable, Optional

_request_id: ContextVar[str] = ContextVar("request_id", default="NO_REQUEST_ID")


def new_request_id() -> str:
    """Build a short, human-readable request ID."""
    return f"REQ-{uuid.uuid4().hex[:8]}"


def set_request_id(request_id: str) -> None:
    """Set the correlation ID for the current context."""
    _request_id.set(request_id)


def get_request_id() -> str:
    """Retrieve the current correlation ID."""
    return _request_id.get()


class RequestIdFilter(logging.Filter):
    """Injects request_id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get()  # type: ignore[attr-defined]
        return True


def _attach(filterer: logging.Filterer) -> None:
    if not any(isinstance(f, RequestIdFilter) for f in filterer.filters):
        filterer.addFilter(RequestIdFilter())


def install_request_id_filter(handlers: Optional[Iterable[logging.Handler]] = None) -> None:
    """Attach RequestIdFilter to ``handlers`` (the root logger's by default).

    Handler-level filters run for records propagated from any logger, so
    formatters using ``%(request_id)s`` never see a record without it.
    """
    for handler in handlers if handlers is not None else logging.getLogger().handlers:
        _attach(handler)


def get_request_logger(name: str) -> logging.Logger:
    """Return a logger with the RequestIdFilter attached.

    The filter adds ``request_id`` to each record so formatters can
    include ``%(request_id)s`` in their format string.
    """
    logger = logging.getLogger(name)
    _attach(logger)
    return logger
