"""
CLI Test Fixtures.
"""

import io
from collections.abc import Callable, Iterable

import pytest
from rich.console import Console


@pytest.fixture
def console() -> Console:
    """Console writing plain text into a buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def feed_input(monkeypatch) -> Callable[[Iterable[str]], None]:
    """
    Replace input() with a scripted sequence of lines.

    Raises EOFError once the lines run out, like a closed stdin.

    Usage:
        def test_shell(feed_input):
            feed_input(["1", "0"])
    """
    def _feed(lines: Iterable[str]) -> None:
        remaining = iter(lines)

        def _input(*args) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", _input)

    return _feed
