"""structlog wiring for the Event Ingest Service.

Every entry carries ``service`` and ``version``; entries emitted while a
request is in flight also carry ``request_id``, ``method`` and ``path``.
"""

import logging
import sys
from typing import Any
from uuid import uuid4

import structlog
from fastapi import Request
from structlog.types import Processor

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_KEYS = ("request_id", "method", "path")


def _drop_health_debug(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    if method_name == "debug" and event_dict.get("path") == "/health":
        raise structlog.DropEvent
    return event_dict


def setup_logging(
    service_name: str,
    service_version: str = "0.1.0",
    log_level: str = "INFO",
    log_format: str = "console",
) -> None:
    """Configure structlog to write to stdout as JSON or colored console lines."""
    for noisy in ("uvicorn.access", "uvicorn.error", "httpx", "httpcore", "asyncpg"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _drop_health_debug,
    ]
    if log_format == "json":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service_name, version=service_version)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, tagged with ``logger_name`` when given."""
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger


async def request_context_middleware(request: Request, call_next):
    """HTTP middleware binding the request id, method and path to log entries.

    The caller's ``X-Request-ID`` is reused when present and echoed back on
    the response.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
    structlog.contextvars.bind_contextvars(
        request_id=request_id, method=request.method, path=request.url.path
    )
    try:
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
    finally:
        structlog.contextvars.unbind_contextvars(*_REQUEST_KEYS)
