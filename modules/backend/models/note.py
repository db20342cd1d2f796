"""
Note Model.

A short text note with a mutable title and body.
"""

from typing import Any

from modules.backend.core.exceptions import InvalidArgumentError
from modules.backend.core.utils import Clock, IdFactory, new_id, utc_now
from modules.backend.models.base import Entity


def require_text(value: Any, field_name: str) -> str:
    """
    Return value if it is a string.

    Raises:
        InvalidArgumentError: If value is None or not a string
    """
    if value is None:
        raise InvalidArgumentError(
            f"{field_name} is required",
            details={"missing_fields": [field_name]},
        )
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{field_name} must be text",
            details={"field": field_name, "type": type(value).__name__},
        )
    return value


class Note(Entity):
    """
    Note entity.

    The id and created_at never change. Every change to title or body
    refreshes updated_at. Empty strings are valid; None is not.
    """

    def __init__(
        self,
        title: str,
        body: str,
        *,
        clock: Clock = utc_now,
        id_factory: IdFactory = new_id,
    ) -> None:
        title = require_text(title, "title")
        body = require_text(body, "body")
        super().__init__(clock=clock, id_factory=id_factory)
        self._title = title
        self._body = body

    @property
    def title(self) -> str:
        return self._title

    @property
    def body(self) -> str:
        return self._body

    def set_title(self, title: str) -> None:
        """Replace the title and refresh updated_at."""
        self._title = require_text(title, "title")
        self._touch()

    def set_body(self, body: str) -> None:
        """Replace the body and refresh updated_at."""
        self._body = require_text(body, "body")
        self._touch()

    def render(self) -> str:
        """Return the fixed five-line text layout used by the shell."""
        return (
            f"ID: {self.id}\n"
            f"Title: {self.title}\n"
            f"Body: {self.body}\n"
            f"Created at: {self.created_at.isoformat()}\n"
            f"Updated at: {self.updated_at.isoformat()}"
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
