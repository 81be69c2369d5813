# Pydantic Models
from .note import (
    Note, NoteBase, NoteCreate, NoteUpdate,
    NoteList, NoteCounts, NoteView, Priority,
)

__all__ = [
    "Note", "NoteBase", "NoteCreate", "NoteUpdate",
    "NoteList", "NoteCounts", "NoteView", "Priority",
]
