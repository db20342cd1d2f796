"""
Note Schemas.

Pydantic schemas describing notes as plain data, used by the shell's
JSON export.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NoteResponse(BaseModel):
    """Schema for a single note."""

    id: str = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    body: str = Field(description="Note body")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class NoteExport(BaseModel):
    """Schema for exporting every note in the session."""

    count: int
    notes: list[NoteResponse]
