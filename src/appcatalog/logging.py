"""
structlog setup shared by the API server and the CLI

Request-scoped values (the request id) live in structlog's context vars and
are merged into every event logged while a request is being handled.
"""

import logging
import secrets
import sys

import structlog
from structlog.contextvars import (
    bind_contextvars,
    clear_contextvars,
    get_contextvars,
    merge_contextvars,
)

REQUEST_ID_KEY = "request_id"


def configure_logging(debug: bool = False, level: str = "INFO") -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        debug: Render events for a terminal and log at DEBUG. Otherwise emit
            one JSON object per line at ``level``.
        level: Standard level name used when ``debug`` is off
    """
    log_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Short URL-safe random id, e.g. ``'q0H6c4Fk2Xb9'``."""
    return secrets.token_urlsafe(9)


def bind_request_id(request_id: str | None = None) -> str:
    """Bind a request id for the current context and return it.

    A fresh id is generated when the caller did not supply one.
    """
    request_id = request_id or generate_request_id()
    bind_contextvars(**{REQUEST_ID_KEY: request_id})
    return request_id


def clear_request_context() -> None:
    clear_contextvars()


def get_request_id() -> str | None:
    return get_contextvars().get(REQUEST_ID_KEY)
