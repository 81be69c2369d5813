"""
Notes Routes
"""
from fastapi import APIRouter, HTTPException, Depends
from typing import Optional
import logging

from ..models import Note, NoteCreate, NoteUpdate, NoteList, NoteCounts, NoteView
from ..database import NoteStore, get_store
from ..services.listing import select_notes, count_notes

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/notes", tags=["Notes"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Note not found")


@router.get("", response_model=NoteList)
def get_notes(
    view: NoteView = NoteView.ALL,
    search: Optional[str] = None,
    store: NoteStore = Depends(get_store),
):
    """List notes for a tab, optionally narrowed by a search term"""
    try:
        notes = store.list_notes()
        return NoteList(notes=select_notes(notes, view, search))
    except Exception:
        logger.exception("List notes failed")
        raise HTTPException(status_code=500, detail="Failed to read notes")


@router.get("/counts", response_model=NoteCounts)
def get_note_counts(store: NoteStore = Depends(get_store)):
    """Number of notes in each tab"""
    try:
        return count_notes(store.list_notes())
    except Exception:
        logger.exception("Count notes failed")
        raise HTTPException(status_code=500, detail="Failed to read notes")


@router.get("/{note_id}", response_model=Note)
def get_note(note_id: str, store: NoteStore = Depends(get_store)):
    try:
        note = store.get_note(note_id)
    except Exception:
        logger.exception(f"Get note {note_id} failed")
        raise HTTPException(status_code=500, detail="Failed to read notes")

    if note is None:
        raise _not_found()
    return note


@router.post("", response_model=Note, status_code=201)
def create_note(note: NoteCreate, store: NoteStore = Depends(get_store)):
    """Create a note"""
    try:
        return store.create_note(note)
    except Exception:
        logger.exception("Create note failed")
        raise HTTPException(status_code=500, detail="Failed to create note")


@router.put("/{note_id}", response_model=Note)
def update_note(note_id: str, note_update: NoteUpdate, store: NoteStore = Depends(get_store)):
    """Merge the supplied fields into a note"""
    try:
        updated = store.update_note(note_id, note_update)
    except Exception:
        logger.exception(f"Update note {note_id} failed")
        raise HTTPException(status_code=500, detail="Failed to update note")

    if updated is None:
        raise _not_found()
    return updated


@router.put("/{note_id}/favourite", response_model=Note)
def toggle_favourite(note_id: str, store: NoteStore = Depends(get_store)):
    """Flip the favourite flag of a note"""
    try:
        updated = store.toggle_favourite(note_id)
    except Exception:
        logger.exception(f"Toggle favourite {note_id} failed")
        raise HTTPException(status_code=500, detail="Failed to update note")

    if updated is None:
        raise _not_found()
    return updated


@router.delete("/{note_id}")
def delete_note(note_id: str, store: NoteStore = Depends(get_store)):
    """Delete a note"""
    try:
        deleted = store.delete_note(note_id)
    except Exception:
        logger.exception(f"Delete note {note_id} failed")
        raise HTTPException(status_code=500, detail="Failed to delete note")

    if not deleted:
        raise _not_found()
    return {"message": "Note deleted successfully"}
