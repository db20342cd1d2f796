"""
Base Model.

Base class for in-memory entities with an immutable id and
lifecycle timestamps.
"""

from datetime import datetime

from modules.backend.core.utils import Clock, IdFactory, new_id, utc_now


class Entity:
    """
    Base class for all entities.

    Provides:
    - A unique id assigned once at construction
    - created_at, set once
    - updated_at, refreshed through _touch()

    The clock and id factory are injectable for deterministic tests.
    """

    def __init__(
        self,
        *,
        clock: Clock = utc_now,
        id_factory: IdFactory = new_id,
    ) -> None:
        self._clock = clock
        self._id = id_factory()
        self._created_at = clock()
        self._updated_at = self._created_at

    @property
    def id(self) -> str:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def _touch(self) -> None:
        """Refresh updated_at, never moving it before created_at."""
        self._updated_at = max(self._clock(), self._created_at)
