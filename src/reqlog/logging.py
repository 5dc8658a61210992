"""Diagnostic events about the logger itself, written as JSON lines to stderr.

These describe what a :class:`~reqlog.logger.Logger` did (area created,
document merged, document dumped); they are never part of the request's log
document.
"""

from __future__ import annotations

import json
import sys
import time
from typing import Any, TextIO

from .models import EntryKind


def log_event(
    event: str,
    *,
    event_id: str,
    area: str | None = None,
    level: EntryKind = "debug",
    stream: TextIO | None = None,
    **extra: Any,
) -> None:
    """Write one diagnostic line for the logger identified by ``event_id``."""
    record: dict[str, Any] = {
        "timestamp": time.time_ns() // 1_000_000,
        "kind": level,
        "event": event,
        "eventId": event_id,
    }
    if area is not None:
        record["area"] = area
    record.update(extra)
    try:
        print(json.dumps(record, default=str), file=stream or sys.stderr)
    except Exception:
        pass  # diagnostics must not crash the request
