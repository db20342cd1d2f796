"""
Note Repository.

Data access layer for notes. Holds the in-memory store for the
Note model.
"""

from modules.backend.models.note import Note
from modules.backend.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note model.

    Inherits standard CRUD operations from BaseRepository
    and adds note-specific queries.
    """

    def search_text(self, query: str) -> list[Note]:
        """
        Search notes by title or body (case-insensitive substring).

        Both sides are lowercased with str.lower(), which does not depend
        on the locale and never expands characters ('ß' stays 'ß').

        Args:
            query: Search query string, matched as-is

        Returns:
            Matching notes in insertion order
        """
        needle = query.lower()
        return [
            note
            for note in self._items.values()
            if needle in note.title.lower() or needle in note.body.lower()
        ]
