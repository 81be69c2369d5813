"""
JSON File Storage
The whole store lives in one JSON document: {"notes": [...]}
"""
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
import json
import logging
import os
import threading

from pydantic import ValidationError

from .config import settings
from .models import Note, NoteCreate, NoteUpdate

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _empty_store() -> Dict[str, Any]:
    return {"notes": []}


def _atomic_write_json(path: Path, data: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


class NoteStore:
    """Notes persisted as a single JSON file, rewritten on every change"""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.RLock()

    # === Raw document access ===

    def read(self) -> Dict[str, Any]:
        """Load the whole document; any failure yields an empty store"""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.debug(f"No data file at {self.path} yet, starting empty")
            return _empty_store()
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {self.path}, starting empty: {e}")
            return _empty_store()

        if not isinstance(data, dict) or not isinstance(data.get("notes"), list):
            logger.warning(f"Unexpected document shape in {self.path}, starting empty")
            return _empty_store()
        return data

    def write(self, data: Dict[str, Any]) -> None:
        """Serialize the whole document back to disk"""
        _atomic_write_json(self.path, data)
        logger.debug(f"Wrote {len(data.get('notes', []))} notes to {self.path}")

    def is_writable(self) -> bool:
        """Check the data file (or its directory) can be written"""
        if self.path.exists():
            return os.access(self.path, os.W_OK)
        parent = self.path.parent
        while not parent.exists() and parent != parent.parent:
            parent = parent.parent
        return os.access(parent, os.W_OK)

    # === Notes ===

    def _load_notes(self) -> List[Note]:
        notes: List[Note] = []
        for raw in self.read()["notes"]:
            try:
                notes.append(Note.model_validate(raw))
            except ValidationError as e:
                logger.warning(f"Skipping malformed note record: {e.error_count()} error(s)")
        return notes

    def _mutate(self, fn: Callable[[List[Dict[str, Any]]], Any]) -> Any:
        """
        Run fn over the raw stored records and write the document back if it
        reports a change. Records fn does not touch are written back as read,
        including ones that fail validation and keys the model does not know.
        """
        with self._lock:
            document = self.read()
            result = fn(document["notes"])
            if result:
                self.write(document)
            return result

    def list_notes(self) -> List[Note]:
        with self._lock:
            return self._load_notes()

    def get_note(self, note_id: str) -> Optional[Note]:
        for note in self.list_notes():
            if note.id == note_id:
                return note
        return None

    def create_note(self, payload: NoteCreate) -> Note:
        def apply(records: List[Dict[str, Any]]) -> Note:
            now = _utc_now()
            taken = {str(r.get("id")) for r in records if isinstance(r, dict)}
            candidate = int(now.timestamp() * 1000)
            while str(candidate) in taken:
                candidate += 1

            note = Note(
                **payload.model_dump(),
                id=str(candidate),
                created_at=now,
                updated_at=now,
            )
            records.append(note.to_record())
            return note

        note = self._mutate(apply)
        logger.info(f"Created note {note.id}")
        return note

    def update_note(self, note_id: str, payload: NoteUpdate) -> Optional[Note]:
        changes = payload.changes()

        def apply(records: List[Dict[str, Any]]) -> Optional[Note]:
            i = _index_of(records, note_id)
            if i is None:
                return None
            return self._merge(records, i, changes)

        updated = self._mutate(apply)
        if updated is not None:
            logger.info(f"Updated note {note_id}: {sorted(changes)}")
        return updated

    def toggle_favourite(self, note_id: str) -> Optional[Note]:
        def apply(records: List[Dict[str, Any]]) -> Optional[Note]:
            i = _index_of(records, note_id)
            if i is None:
                return None
            current = Note.model_validate(records[i])
            return self._merge(records, i, {"isFavourite": not current.is_favourite})

        return self._mutate(apply)

    def delete_note(self, note_id: str) -> bool:
        def apply(records: List[Dict[str, Any]]) -> bool:
            i = _index_of(records, note_id)
            if i is None:
                return False
            del records[i]
            return True

        deleted = self._mutate(apply)
        if deleted:
            logger.info(f"Deleted note {note_id}")
        return deleted

    def _merge(self, records: List[Dict[str, Any]], i: int, changes: Dict[str, Any]) -> Note:
        """Shallow-merge changes into record i, restamping updatedAt"""
        raw = records[i]
        current = Note.model_validate(raw)
        updated = Note.model_validate({**raw, **changes}).model_copy(
            update={"updated_at": self._next_stamp(current)}
        )
        records[i] = {**raw, **updated.to_record()}
        return updated

    @staticmethod
    def _next_stamp(note: Note) -> datetime:
        # updatedAt must move forward even on coarse clocks
        return max(_utc_now(), note.updated_at + timedelta(microseconds=1))


def _index_of(records: List[Any], note_id: str) -> Optional[int]:
    for i, raw in enumerate(records):
        if isinstance(raw, dict) and str(raw.get("id")) == note_id:
            return i
    return None


# Singleton instance
store = NoteStore(settings.data_file)


def get_store() -> NoteStore:
    """Dependency for getting the note store in routes"""
    return store
