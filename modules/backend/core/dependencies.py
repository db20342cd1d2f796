"""
Service Dependencies.

Composition root for the note service. Every call builds a new,
independent service; nothing is shared at module level.
"""

from modules.backend.core.config import get_app_config
from modules.backend.core.logging import get_logger
from modules.backend.core.utils import Clock, IdFactory, new_id, utc_now
from modules.backend.services.note import NoteService

logger = get_logger(__name__)


def get_seed_notes() -> list[tuple[str, str]]:
    """Return the (title, body) pairs configured in application.yaml."""
    return [
        (entry.title, entry.body)
        for entry in get_app_config().application.seed_notes
    ]


def build_note_service(
    seed: bool = True,
    clock: Clock = utc_now,
    id_factory: IdFactory = new_id,
) -> NoteService:
    """
    Build a NoteService with its own empty store.

    Args:
        seed: Pre-load the seed notes from application.yaml
        clock: Timestamp source for new and updated notes
        id_factory: Identifier source for new notes

    Returns:
        Ready-to-use NoteService
    """
    service = NoteService(clock=clock, id_factory=id_factory)
    if seed:
        seeded = service.seed(get_seed_notes())
        logger.debug("Seed notes loaded", extra={"count": len(seeded)})
    return service
