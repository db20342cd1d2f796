"""
Base Repository.

Base class for all repositories with common CRUD operations over an
insertion-ordered in-memory store.
"""

from typing import Generic, TypeVar

from modules.backend.models.base import Entity

ModelType = TypeVar("ModelType", bound=Entity)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common CRUD operations.

    Records are keyed by their id and iterate oldest-added-first.
    Each repository instance owns its own store. Not thread-safe.
    """

    def __init__(self) -> None:
        self._items: dict[str, ModelType] = {}

    def add(self, instance: ModelType) -> ModelType:
        """Append a record at the end of iteration order."""
        self._items[instance.id] = instance
        return instance

    def get_by_id_or_none(self, id: str) -> ModelType | None:
        """Get a single record by ID, returning None if not found."""
        return self._items.get(id)

    def get_all(self) -> list[ModelType]:
        """Get a snapshot of all records in insertion order."""
        return list(self._items.values())

    def delete(self, id: str) -> bool:
        """Delete a record by ID. Returns False if it did not exist."""
        return self._items.pop(id, None) is not None

    def exists(self, id: str) -> bool:
        """Check if a record exists by ID."""
        return id in self._items

    def count(self) -> int:
        return len(self._items)
