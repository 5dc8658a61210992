"""Event id generation backed by cuid2."""

from __future__ import annotations

from typing import Any, Callable

from cuid2 import Cuid

from .errors import InvalidConfiguration

ID_LENGTH = 24


def seed(fingerprint: str, *, length: int = ID_LENGTH) -> Callable[[], str]:
    """Seed a cuid2 generator with ``fingerprint`` (the service name)."""
    if not isinstance(fingerprint, str) or not fingerprint:
        raise InvalidConfiguration(
            f"id fingerprint must be a non-empty string, got {fingerprint!r}"
        )

    def service_fingerprint(*_args: Any, **_kwargs: Any) -> str:
        return fingerprint

    return Cuid(length=length, fingerprint=service_fingerprint).generate
