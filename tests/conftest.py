"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Notes are built with a deterministic clock and id factory so tests can
assert exact ids and timestamps.
"""

from collections.abc import Callable
from datetime import datetime, timedelta

import pytest

from modules.backend.services.note import NoteService


class FakeClock:
    """Clock that advances by a fixed step every time it is read."""

    def __init__(
        self,
        start: datetime = datetime(2024, 1, 1, 12, 0, 0),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.current = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        self.calls += 1
        return value


def sequential_ids(prefix: str = "note") -> Callable[[], str]:
    """Return an id factory producing note-1, note-2, ..."""
    counter = 0

    def _next() -> str:
        nonlocal counter
        counter += 1
        return f"{prefix}-{counter}"

    return _next


@pytest.fixture
def clock() -> FakeClock:
    """Deterministic clock starting at 2024-01-01 12:00:00, one second per read."""
    return FakeClock()


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Deterministic id factory."""
    return sequential_ids()


@pytest.fixture
def note_service(clock: FakeClock, id_factory: Callable[[], str]) -> NoteService:
    """Empty NoteService wired to the deterministic clock and ids."""
    return NoteService(clock=clock, id_factory=id_factory)
