# Pydantic schemas package
from modules.backend.schemas.note import NoteExport, NoteResponse

__all__ = [
    "NoteExport",
    "NoteResponse",
]
