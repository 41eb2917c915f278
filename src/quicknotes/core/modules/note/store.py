from collections.abc import Iterator
from contextlib import contextmanager
from datetime import timedelta
from threading import RLock
from uuid import UUID

import structlog

from quicknotes.core.modules.note.models import DEFAULT_LIMIT, DEFAULT_PAGE, Note
from quicknotes.utils import now

logger = structlog.get_logger(__name__)

_TICK = timedelta(microseconds=1)


class NoteStore:
    """In-memory notes keyed by id, kept in insertion order.

    Every operation holds the store lock, so read-merge-write sequences are
    atomic even when handlers run in a worker thread pool. Missing ids are
    reported as None/False, never raised.
    """

    def __init__(self) -> None:
        self._notes: dict[UUID, Note] = {}
        self._lock = RLock()

    @contextmanager
    def _locked(self) -> Iterator[dict[UUID, Note]]:
        with self._lock:
            yield self._notes

    def create(self, title: str, content: str) -> Note:
        """Create a note with a fresh id and identical created/updated timestamps."""
        timestamp = now()
        with self._locked() as notes:
            note = Note(title=title, content=content, created_at=timestamp, updated_at=timestamp)
            notes[note.id] = note
        logger.debug("note_created", note_id=note.id)
        return note

    def find_by_id(self, note_id: UUID) -> Note | None:
        with self._locked() as notes:
            return notes.get(note_id)

    def find_all(
        self, search: str | None = None, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT
    ) -> tuple[list[Note], int]:
        """Return one page of notes and the total number of matching notes.

        A non-empty search keeps notes whose title or content contains it,
        ignoring case. The total is counted after filtering.
        """
        with self._locked() as notes:
            items = list(notes.values())

        if search:
            needle = search.casefold()
            items = [note for note in items if needle in note.title.casefold() or needle in note.content.casefold()]

        total = len(items)
        start = (page - 1) * limit
        return items[start : start + limit], total

    def update(self, note_id: UUID, fields: dict[str, str]) -> Note | None:
        """Merge the supplied fields onto the note and refresh updated_at.

        Only title and content can change. updated_at always moves strictly
        forward, even if the clock has not advanced since the last write.
        """
        changes = {key: value for key, value in fields.items() if key in ("title", "content") and value is not None}
        with self._locked() as notes:
            existing = notes.get(note_id)
            if existing is None:
                return None
            timestamp = max(now(), existing.updated_at + _TICK)
            updated = existing.model_copy(update={**changes, "updated_at": timestamp})
            notes[note_id] = updated
        logger.debug("note_updated", note_id=note_id, fields=sorted(changes))
        return updated

    def remove(self, note_id: UUID) -> Note | None:
        """Delete the note and return it, or None if it was already absent."""
        with self._locked() as notes:
            removed = notes.pop(note_id, None)
        if removed is not None:
            logger.debug("note_deleted", note_id=note_id)
        return removed

    def delete(self, note_id: UUID) -> bool:
        """Delete the note, return whether anything was removed."""
        return self.remove(note_id) is not None

    def count(self) -> int:
        with self._locked() as notes:
            return len(notes)

    def clear(self) -> int:
        """Drop every note and return how many were removed."""
        with self._locked() as notes:
            removed = len(notes)
            notes.clear()
        return removed

    def __len__(self) -> int:
        return self.count()
