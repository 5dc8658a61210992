"""Root area construction."""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any, Callable

from ada_url import URL

from .config import DEFAULT_BASE_URL
from .errors import InvalidConfiguration
from .models import ROOT_AREA, LogDocument, LogEntry, RootPayload

REQUEST_RECEIVED = "Request received"
PARENT_EVENT_MISSING = "Parent event ID expected but not found"


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def normalize_path(path: str | None, base: str = DEFAULT_BASE_URL) -> str:
    """Parse ``path`` against a dummy authority and keep ``pathname + search``.

    Parsing follows the WHATWG URL standard, so scheme and host a caller
    might include are discarded and percent-encoding matches what browsers
    and Node report.

    >>> normalize_path("/users?page=2&limit=10")
    '/users?page=2&limit=10'
    >>> normalize_path("/a/./b/../c#top")
    '/a/c'
    """
    url = URL(f"{base.rstrip('/')}{path if path is not None else '/'}")
    return f"{url.pathname}{url.search}"


def build_root_entries(
    *,
    details: Mapping[str, Any],
    event_id: str,
    path: str | None = None,
    method: str | None = None,
    parent_event_id: str | None = None,
    with_parent_event_id: bool = False,
    clock: Callable[[], int] = now_ms,
    base_url: str = DEFAULT_BASE_URL,
) -> LogDocument:
    """Build the ``root`` area recording the request's arrival.

    A second ``error`` entry is added when a parent event id was expected
    (``with_parent_event_id``) but none was supplied.
    """
    try:
        payload = RootPayload(
            path=normalize_path(path, base_url),
            method=method,
            details=details,
            event_id=event_id,
            parent_event_id=parent_event_id or None,
        )
    except ValueError as exc:
        raise InvalidConfiguration(str(exc)) from exc

    entries = [
        LogEntry(
            kind="info",
            message=REQUEST_RECEIVED,
            payload=payload.to_dict(),
            timestamp=clock(),
        )
    ]
    if with_parent_event_id and not parent_event_id:
        entries.append(LogEntry(kind="error", message=PARENT_EVENT_MISSING, timestamp=clock()))
    return {ROOT_AREA: entries}
