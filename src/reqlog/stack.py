"""Error formatting: turn exceptions into serializable ``{message, stack}`` pairs.

Stack cleaning is a heuristic. The first frame that points into one of the
boundary directories (``.wrangler`` build output or ``node_modules`` by
default) through an absolute ``file://`` URL decides the prefix that is cut
from every frame. Frames outside that prefix only lose the ``file://`` scheme.
"""

from __future__ import annotations

import re
import traceback
from collections.abc import Iterable, Sequence
from typing import Any

from .config import DEFAULT_STACK_BOUNDARIES
from .models import ErrorPayload

SUMMARY_PREFIX = "Error: "
FILE_SCHEME = "file://"


def _boundary_pattern(boundaries: Iterable[str]) -> re.Pattern[str]:
    markers = "|".join(re.escape(b) for b in boundaries)
    return re.compile(rf"file:///(.*)(?:{markers})/.*\)")


def find_prefix(lines: Iterable[str], boundaries: Sequence[str] = DEFAULT_STACK_BOUNDARIES) -> str:
    """Return the path segment preceding the first boundary frame, or ``""``."""
    if not boundaries:
        return ""
    pattern = _boundary_pattern(boundaries)
    for line in lines:
        match = pattern.search(line)
        if match:
            return match.group(1)
    return ""


def pretty_stack(
    stack: str | None,
    boundaries: Sequence[str] = DEFAULT_STACK_BOUNDARIES,
) -> list[str]:
    """Clean a raw stack trace string into a list of frame lines.

    Lines are trimmed, the ``Error: `` summary line is dropped, the detected
    prefix is removed and the ``file://`` scheme is stripped. Order is kept.
    """
    if not stack:
        return []
    raw_lines = stack.split("\n")
    prefix = find_prefix(raw_lines, boundaries)

    cleaned: list[str] = []
    for line in raw_lines:
        line = line.strip()
        if line.startswith(SUMMARY_PREFIX):
            continue
        if prefix:
            line = line.replace(prefix, "", 1)
        cleaned.append(line.replace(FILE_SCHEME, "", 1))
    return cleaned


def raw_stack(exc: BaseException) -> str | None:
    """Raw stack text of an exception.

    Errors rehydrated from JavaScript services carry a ``stack`` string; raised
    Python exceptions contribute their traceback frames. Anything else has none.
    """
    stack = getattr(exc, "stack", None)
    if isinstance(stack, str):
        return stack
    if exc.__traceback__ is not None:
        return "".join(traceback.format_tb(exc.__traceback__)).rstrip("\n")
    return None


def pretty_error(
    exc: BaseException,
    boundaries: Sequence[str] = DEFAULT_STACK_BOUNDARIES,
) -> ErrorPayload:
    return ErrorPayload(message=str(exc), stack=pretty_stack(raw_stack(exc), boundaries))


def resolve_payload(payload: Any, boundaries: Sequence[str] = DEFAULT_STACK_BOUNDARIES) -> Any:
    """Format exception payloads; pass every other value through unchanged."""
    if isinstance(payload, BaseException):
        return pretty_error(payload, boundaries).model_dump()
    return payload
