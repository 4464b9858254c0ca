"""
Logging configuration using structlog
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any, Optional

import structlog

request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def add_request_id(logger: Any, method_name: str, event_dict: dict) -> dict:
    """Attach the current request id, if any, to the event dict."""
    _ = logger, method_name

    request_id = request_id_ctx.get()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def configure_logging(debug: bool = False, level: str = "INFO") -> None:
    """Configure stdlib logging and structlog.

    Args:
        debug: If True, render human-readable console output. If False, render JSON.
        level: Log level name; debug mode always logs at DEBUG.
    """
    log_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_request_id,
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def set_request_id(request_id: Optional[str] = None) -> str:
    if request_id is None:
        request_id = uuid.uuid4().hex[:12]
    request_id_ctx.set(request_id)
    return request_id


def clear_request_id() -> None:
    request_id_ctx.set(None)


def get_request_id() -> Optional[str]:
    return request_id_ctx.get()
