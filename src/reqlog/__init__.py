"""Request-scoped structured logging."""

from .errors import InvalidConfiguration, ReqLogError
from .logger import AreaWriter, Logger, create_logger
from .models import ErrorPayload, LogEntry, RootPayload
from .root import build_root_entries, normalize_path
from .stack import pretty_error, pretty_stack

__all__ = [
    "AreaWriter",
    "ErrorPayload",
    "InvalidConfiguration",
    "LogEntry",
    "Logger",
    "ReqLogError",
    "RootPayload",
    "build_root_entries",
    "create_logger",
    "normalize_path",
    "pretty_error",
    "pretty_stack",
]
