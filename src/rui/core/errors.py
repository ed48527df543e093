"""
Error kinds raised inside the property/style engine and the session bridge.

Public entry points (``set``, ``get``, lookups, getter-RPCs) never let these
escape to the application: they are caught at the boundary, reported through
``report_error`` and turned into a falsy result.
"""

from typing import Any

from .logging_config import get_logger
from .metrics import metrics_collector

logger = get_logger(__name__)


class RUIError(Exception):
    """Base class for framework errors."""

    event = "rui_error"

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context


class IncompatibleTypeError(RUIError):
    """A value cannot be coerced to the type a property requires."""

    event = "incompatible_type"


class InvalidFormatError(RUIError):
    """A string failed to parse as color, size, angle or .rui text."""

    event = "invalid_format"


class DataParseError(InvalidFormatError):
    """Syntax error in .rui text."""

    event = "data_parse_failed"

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message, line=line, column=column)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"{self.message} (line {self.line}, column {self.column})"


class UnknownTagError(RUIError):
    """Property tag is not supported by the target bag."""

    event = "unknown_tag"


class NotFoundError(RUIError):
    """View lookup by id failed."""

    event = "view_not_found"


class BridgeDisconnectedError(RUIError):
    """Outbound write attempted with no live browser connection."""

    event = "bridge_disconnected"


class GetterTimeoutError(RUIError):
    """Browser did not answer a getter request in time."""

    event = "getter_timeout"


class ResourceMissingError(RUIError):
    """Image, string or raw resource is not registered."""

    event = "resource_missing"


def report_error(error: RUIError, **context: Any) -> None:
    """
    Log a framework error with its structured context.

    Args:
        error: Error to report
        **context: Extra fields merged into the log record
    """
    metrics_collector.record_error(error.event)
    fields = {**error.context, **context}
    fields.setdefault("message", error.message)
    logger.error(error.event, **fields)


__all__ = [
    "RUIError",
    "IncompatibleTypeError",
    "InvalidFormatError",
    "DataParseError",
    "UnknownTagError",
    "NotFoundError",
    "BridgeDisconnectedError",
    "GetterTimeoutError",
    "ResourceMissingError",
    "report_error",
]
