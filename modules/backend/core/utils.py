"""
Core Utilities.

Shared utility functions used across the backend.
All modules should import utilities from this module.

The clock and id generator are plain callables so that services and
entities can take them as constructor arguments and tests can swap in
deterministic replacements.
"""

from collections.abc import Callable
from datetime import datetime, timezone
from uuid import uuid4

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values in the application should be timezone-naive
    and assumed to be UTC.

    Returns:
        Current UTC time with tzinfo stripped
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id() -> str:
    """Return a new random UUID4 as a string."""
    return str(uuid4())


# Non-breaking spaces count as content, not blank space.
_NON_BREAKING_SPACES = frozenset("\u00a0\u2007\u202f")


def is_blank(text: str) -> bool:
    """
    Return True if text is empty or holds only whitespace.

    Non-breaking spaces (U+00A0, U+2007, U+202F) are treated as
    content, unlike str.isspace().
    """
    return all(ch.isspace() and ch not in _NON_BREAKING_SPACES for ch in text)
