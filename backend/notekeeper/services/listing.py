"""
Notes Listing Service
Tab filter, search and ordering for the notes list
"""
from typing import Iterable, List, Optional

from ..models import Note, NoteCounts, NoteView


def filter_by_view(notes: Iterable[Note], view: NoteView = NoteView.ALL) -> List[Note]:
    """Keep the notes that belong to a tab"""
    if view == NoteView.DRAFTS:
        return [n for n in notes if n.is_draft]
    if view == NoteView.FAVOURITES:
        return [n for n in notes if n.is_favourite]
    return list(notes)


def filter_by_search(notes: Iterable[Note], term: Optional[str]) -> List[Note]:
    """Case-insensitive substring match on title or content"""
    if not term:
        return list(notes)
    needle = term.lower()
    return [
        n for n in notes
        if needle in n.title.lower() or needle in n.content.lower()
    ]


def sort_notes(notes: Iterable[Note]) -> List[Note]:
    """
    Highest priority first, most recently updated first within a priority.
    Python's sort is stable, so ties keep their stored order.
    """
    ordered = sorted(notes, key=lambda n: n.updated_at, reverse=True)
    return sorted(ordered, key=lambda n: n.priority.rank, reverse=True)


def select_notes(
    notes: Iterable[Note],
    view: NoteView = NoteView.ALL,
    search: Optional[str] = None,
) -> List[Note]:
    """Filter by tab, then by search term, then sort"""
    return sort_notes(filter_by_search(filter_by_view(notes, view), search))


def count_notes(notes: Iterable[Note]) -> NoteCounts:
    """Per-tab counters, ignoring any search term"""
    notes = list(notes)
    return NoteCounts(
        all=len(notes),
        drafts=sum(1 for n in notes if n.is_draft),
        favourites=sum(1 for n in notes if n.is_favourite),
    )
