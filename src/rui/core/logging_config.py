"""
Structured Logging Configuration
Session-aware logging with structlog.

Lines logged while a session handles an inbound message carry the session
id, the html id of the target view and the command name, in that order.
Long string fields (rendered HTML, raw ``.rui`` answers, script frames)
are clipped before rendering.
"""

import logging
import sys
from typing import Any, MutableMapping

import structlog
from pythonjsonlogger import jsonlogger

# Context fields bound by sessions, in display order
CONTEXT_KEYS = ("session_id", "view_id", "command")

MAX_VALUE_LENGTH = 240

# Per-request and per-frame chatter of the server stack
NOISY_LOGGERS = ("uvicorn.access", "websockets", "httpx")


def add_session_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Put the session fields right after the event name and drop empty ones."""
    context = {}
    for key in CONTEXT_KEYS:
        value = event_dict.pop(key, None)
        if value is not None and value != "":
            context[key] = value
    if not context:
        return event_dict
    event = event_dict.pop("event", "")
    return {"event": event, **context, **event_dict}


def clip_long_values(max_length: int = MAX_VALUE_LENGTH):
    """Processor clipping string fields longer than ``max_length``."""

    def processor(
        logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
    ) -> MutableMapping[str, Any]:
        for key, value in event_dict.items():
            if key != "event" and isinstance(value, str) and len(value) > max_length:
                event_dict[key] = f"{value[:max_length]}... ({len(value)} chars)"
        return event_dict

    return processor


def configure_logging(
    level: str = "INFO", json_logs: bool = False, max_value_length: int = MAX_VALUE_LENGTH
) -> None:
    """
    Configure structured logging for the server and its sessions.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Use JSON formatter for machine-readable logs
        max_value_length: Longest string field written unclipped
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_logs:
        handler = logging.StreamHandler(sys.stdout)
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level"},
        )
        handler.setFormatter(formatter)
        logging.basicConfig(level=log_level, handlers=[handler])
    else:
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stdout,
        )

    # Access lines only show up when debugging
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_session_context,
            clip_long_values(max_value_length),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


class LogContext:
    """
    Bind session fields to every log line emitted inside the block.

    Only ``session_id``, ``view_id`` and ``command`` are accepted. Values
    bound by an enclosing block are restored on exit.
    """

    def __init__(self, **kwargs: Any):
        unknown = sorted(set(kwargs) - set(CONTEXT_KEYS))
        if unknown:
            raise TypeError(f"unsupported log context fields: {', '.join(unknown)}")
        self.context = {key: value for key, value in kwargs.items() if value is not None}
        self._previous: dict[str, Any] = {}

    def __enter__(self) -> "LogContext":
        bound = structlog.contextvars.get_contextvars()
        self._previous = {key: bound[key] for key in self.context if key in bound}
        structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.unbind_contextvars(*self.context.keys())
        if self._previous:
            structlog.contextvars.bind_contextvars(**self._previous)
