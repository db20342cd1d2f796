"""
Note Service.

Business logic layer for notes. Owns the note store, handles
validation, and implements create/read/update/delete/search.
"""

from collections.abc import Iterable

from modules.backend.core.utils import Clock, IdFactory, is_blank, new_id, utc_now
from modules.backend.models.note import Note
from modules.backend.repositories.note import NoteRepository
from modules.backend.services.base import BaseService


class NoteService(BaseService):
    """
    Service for note business logic.

    Each instance owns a private repository, so independent services
    never share notes. Not thread-safe: a multi-threaded host must
    serialize all calls behind one lock.

    "Not found" is reported through return values (None / False).
    The only error raised is InvalidArgumentError for absent fields.
    """

    def __init__(
        self,
        repository: NoteRepository | None = None,
        *,
        clock: Clock = utc_now,
        id_factory: IdFactory = new_id,
    ) -> None:
        super().__init__()
        self.repo = repository if repository is not None else NoteRepository()
        self._clock = clock
        self._id_factory = id_factory

    def create(self, title: str, body: str) -> Note:
        """
        Create a new note.

        Args:
            title: Note title
            body: Note body

        Returns:
            Created note

        Raises:
            InvalidArgumentError: If title or body is absent
        """
        note = Note(title, body, clock=self._clock, id_factory=self._id_factory)
        self.repo.add(note)

        self._log_operation("Note created", note_id=note.id)
        return note

    def list_all(self) -> list[Note]:
        """Return a snapshot of all notes, oldest first."""
        return self.repo.get_all()

    def find_by_id(self, note_id: str) -> Note | None:
        """Return the note with this id, or None."""
        return self.repo.get_by_id_or_none(note_id)

    def update(self, note_id: str, title: str, body: str) -> bool:
        """
        Replace the title and body of an existing note.

        Both fields are validated before either is written, so a
        rejected update leaves the note untouched.

        Args:
            note_id: Note ID to update
            title: New title
            body: New body

        Returns:
            True if the note was updated, False if no such note exists

        Raises:
            InvalidArgumentError: If title or body is absent
        """
        note = self.repo.get_by_id_or_none(note_id)
        if note is None:
            self._log_debug("Update skipped, note not found", note_id=note_id)
            return False

        self._validate_required({"title": title, "body": body})
        note.set_title(title)
        note.set_body(body)

        self._log_operation("Note updated", note_id=note_id)
        return True

    def delete(self, note_id: str) -> bool:
        """
        Delete a note.

        Returns:
            True if a note was removed, False if no such note exists
        """
        deleted = self.repo.delete(note_id)
        if deleted:
            self._log_operation("Note deleted", note_id=note_id)
        else:
            self._log_debug("Delete skipped, note not found", note_id=note_id)
        return deleted

    def search(self, query: str | None) -> list[Note]:
        """
        Search notes by title or body.

        A None or whitespace-only query returns every note. Non-breaking
        spaces are not whitespace here, so a U+00A0 query is searched for.

        Args:
            query: Case-insensitive substring to look for

        Returns:
            Matching notes, oldest first
        """
        if query is None or is_blank(query):
            return self.list_all()

        results = self.repo.search_text(query)
        self._log_debug("Searched notes", query=query, results=len(results))
        return results

    def count(self) -> int:
        """Number of notes in the store."""
        return self.repo.count()

    def seed(self, entries: Iterable[tuple[str, str]]) -> list[Note]:
        """Create one note per (title, body) pair, in order."""
        return [self.create(title, body) for title, body in entries]
