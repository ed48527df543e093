"""Core utilities and infrastructure."""

from .config import POPUP_LAYER_ID, ROOT_VIEW_ID, AppParams, Settings, get_settings
from .logging_config import configure_logging, get_logger, LogContext
from .errors import (
    RUIError,
    IncompatibleTypeError,
    InvalidFormatError,
    DataParseError,
    UnknownTagError,
    NotFoundError,
    BridgeDisconnectedError,
    GetterTimeoutError,
    ResourceMissingError,
    report_error,
)
from .metrics import MetricsCollector, metrics_collector

__all__ = [
    # Config
    "AppParams",
    "POPUP_LAYER_ID",
    "ROOT_VIEW_ID",
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # Errors
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
    # Metrics
    "MetricsCollector",
    "metrics_collector",
]
