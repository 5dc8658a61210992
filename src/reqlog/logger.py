"""Request-scoped log accumulator."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable

from pydantic import ValidationError

from .config import Settings, get_settings
from .errors import InvalidConfiguration
from .ids import seed
from .logging import log_event
from .models import ROOT_AREA, Details, EntryKind, LogDocument, LogEntry
from .root import build_root_entries, now_ms
from .stack import resolve_payload

REQUEST_COMPLETED = "Request completed"


class AreaWriter:
    """Write handle bound to one area of a :class:`Logger`."""

    def __init__(self, logger: Logger, name: str) -> None:
        self._logger = logger
        self.name = name

    def info(self, message: str, payload: Any = None) -> None:
        self._logger._add(self.name, "info", message, payload)

    def warn(self, message: str, payload: Any = None) -> None:
        self._logger._add(self.name, "warn", message, payload)

    def error(self, message: str, payload: Any = None) -> None:
        self._logger._add(self.name, "error", message, payload)

    def log(self, message: str, payload: Any = None) -> None:
        self._logger._add(self.name, "log", message, payload)

    def debug(self, message: str, payload: Any = None) -> None:
        self._logger._add(self.name, "debug", message, payload)

    def __repr__(self) -> str:
        return f"AreaWriter({self.name!r})"


class Logger:
    """Accumulates one request's log document, grouped by area.

    The ``root`` area is written at construction and closed by :meth:`dump`.
    Raises :class:`InvalidConfiguration` when ``details["service"]`` is
    missing or not a non-empty string, or when the ``REQLOG_`` settings are
    malformed; no other method raises. An empty ``override_event_id`` falls
    back to a generated id.
    """

    def __init__(
        self,
        *,
        details: Mapping[str, Any],
        path: str | None = None,
        method: str | None = None,
        parent_event_id: str | None = None,
        with_parent_event_id: bool = False,
        default_area: str | None = None,
        override_event_id: str | None = None,
        settings: Settings | None = None,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[str], Callable[[], str]] = seed,
    ) -> None:
        try:
            self._settings = settings or get_settings()
        except ValueError as exc:
            raise InvalidConfiguration(f"invalid REQLOG_ settings: {exc}") from exc
        self._clock = clock

        try:
            service = Details.model_validate(details).service
        except ValidationError as exc:
            raise InvalidConfiguration(f"invalid request details: {exc}") from exc

        self.event_id: str = override_event_id or id_factory(service)()
        self.parent_event_id = parent_event_id
        self.default_area = default_area or self._settings.default_area

        self._log: LogDocument = build_root_entries(
            path=path,
            method=method,
            details=details,
            event_id=self.event_id,
            parent_event_id=parent_event_id,
            with_parent_event_id=with_parent_event_id,
            clock=clock,
            base_url=self._settings.base_url,
        )

        self._diagnose("logger_created", service=service, parent_event_id=parent_event_id)
        if len(self._log[ROOT_AREA]) > 1:
            self._diagnose("parent_event_missing", level="warn")

    @property
    def areas(self) -> list[str]:
        return list(self._log)

    def get_area(self, name: str | None = None) -> AreaWriter:
        """Return a writer for ``name`` (default area if omitted), creating it."""
        if name is None:
            name = self.default_area
        if name not in self._log:
            self._log[name] = []
            self._diagnose("area_created", area=name)
        return AreaWriter(self, name)

    def dump(self) -> dict[str, list[dict[str, Any]]]:
        """Close the root area and return the JSON-ready document.

        Each call appends another completion entry to ``root``.
        """
        started = self._log[ROOT_AREA][0].timestamp
        self._add(ROOT_AREA, "info", REQUEST_COMPLETED, {"totalDuration": self._clock() - started})
        self._diagnose("log_dumped", areas=len(self._log))
        return {name: [entry.to_dict() for entry in entries] for name, entries in self._log.items()}

    def append_log_data(self, incoming: Mapping[str, Sequence[LogEntry | Mapping[str, Any]]]) -> None:
        """Adopt areas from a log document produced elsewhere.

        The incoming ``root`` area is ignored and areas this logger already has
        are kept as they are. ``incoming`` itself is not modified.
        """
        for name, entries in incoming.items():
            if name == ROOT_AREA or name in self._log:
                continue
            self._log[name] = [LogEntry.model_validate(entry) for entry in entries]
            self._diagnose("area_adopted", area=name, entries=len(self._log[name]))

    def _add(self, name: str, kind: EntryKind, message: str, payload: Any = None) -> None:
        entry = LogEntry(
            kind=kind,
            message=message,
            payload=resolve_payload(payload, self._settings.stack_boundaries),
            timestamp=self._clock(),
        )
        self._log.setdefault(name, []).append(entry)

    def _diagnose(self, event: str, *, level: EntryKind = "debug", **extra: Any) -> None:
        if self._settings.diagnostics:
            log_event(event, event_id=self.event_id, level=level, **extra)


def create_logger(**options: Any) -> Logger:
    """Factory wrapper around :class:`Logger`."""
    return Logger(**options)
