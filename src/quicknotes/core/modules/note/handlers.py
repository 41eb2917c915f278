"""Note operations over an explicitly passed store.

Handlers expect already validated input. A missing note is raised as a 404
ApiError; nothing here catches errors.
"""

from uuid import UUID

import structlog

from quicknotes.core.modules.note.models import ListNotesQuery, Note, NoteCreate, NoteUpdate
from quicknotes.core.modules.note.store import NoteStore
from quicknotes.core.pagination import Pagination, PaginationResult
from quicknotes.errors import ApiError

logger = structlog.get_logger(__name__)


def _not_found(note_id: UUID) -> ApiError:
    return ApiError.not_found(f"Note with ID {note_id} not found")


def create_note(store: NoteStore, data: NoteCreate) -> Note:
    return store.create(data.title, data.content)


def get_note(store: NoteStore, note_id: UUID) -> Note:
    note = store.find_by_id(note_id)
    if note is None:
        raise _not_found(note_id)
    return note


def list_notes(store: NoteStore, query: ListNotesQuery) -> PaginationResult[Note]:
    items, total = store.find_all(query.search, query.page, query.limit)
    pagination = Pagination.build(page=query.page, limit=query.limit, total=total)
    logger.debug(
        "list_notes",
        search=query.search,
        page=query.page,
        limit=query.limit,
        total=total,
        returned=len(items),
    )
    return PaginationResult(items=items, pagination=pagination)


def update_note(store: NoteStore, note_id: UUID, data: NoteUpdate) -> Note:
    updated = store.update(note_id, data.changes())
    if updated is None:
        raise _not_found(note_id)
    return updated


def delete_note(store: NoteStore, note_id: UUID) -> Note:
    """Delete the note and return its last stored value."""
    removed = store.remove(note_id)
    if removed is None:
        raise _not_found(note_id)
    return removed
