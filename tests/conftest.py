"""Shared test fixtures."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from reqlog.config import Settings
from reqlog.logger import Logger


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture()
def details() -> dict[str, Any]:
    return {"service": "test-service"}


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def make_logger(
    details: dict[str, Any], clock: FakeClock, settings: Settings
) -> Callable[..., Logger]:
    def factory(**options: Any) -> Logger:
        options.setdefault("details", details)
        options.setdefault("clock", clock)
        options.setdefault("settings", settings)
        return Logger(**options)

    return factory
