"""
structlog setup and per-request log context for bookgraph

Every event logged while a request is in flight carries its ``request_id``
and, for ``/graphql`` requests, the ``graphql_operation`` being executed
(e.g. ``mutation:CreateBook``), so resolver logs can be traced back to the
document that triggered them.
"""

import logging
import secrets
import sys
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
graphql_operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)

_REQUEST_CONTEXT = {
    "request_id": request_id_ctx,
    "graphql_operation": graphql_operation_ctx,
}

# Libraries that are chatty at DEBUG level (aiosqlite logs every cursor call)
_QUIET_LOGGERS = ("aiosqlite", "asyncio", "multipart")


class RequestContextFilter:
    """Copy the current request context onto each event dict."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        # Required by the structlog processor interface
        _ = logger, method_name

        for key, var in _REQUEST_CONTEXT.items():
            value = var.get()
            # Explicit keyword arguments on the log call win
            if value and key not in event_dict:
                event_dict[key] = value

        return event_dict


def _resolve_level(debug: bool, level: str | None) -> int:
    if debug:
        return logging.DEBUG
    if level is None:
        return logging.INFO
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog on top of the stdlib logging module.

    Args:
        debug: Force DEBUG level and render human-readable console output.
        level: Level name (``"info"``, ``"WARNING"``, ...) used when not in
            debug mode. Output is rendered as JSON lines.
    """
    log_level = _resolve_level(debug, level)

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.INFO))

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        RequestContextFilter(),
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger, typically ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Return a short random request id (12 urlsafe characters)."""
    return secrets.token_urlsafe(9)


def set_request_context(request_id: str | None = None) -> str:
    """Start a request context, generating a request id if none was supplied."""
    if not request_id:
        request_id = generate_request_id()

    request_id_ctx.set(request_id)
    graphql_operation_ctx.set(None)
    return request_id


def set_graphql_operation(operation: str | None) -> None:
    """Record the GraphQL operation name for the rest of the request."""
    graphql_operation_ctx.set(operation)


def clear_request_context() -> None:
    for var in _REQUEST_CONTEXT.values():
        var.set(None)
