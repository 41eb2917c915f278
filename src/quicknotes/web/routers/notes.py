"""Note-related API endpoints."""

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from quicknotes.core.modules.note import handlers
from quicknotes.core.modules.note.models import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH, Note
from quicknotes.web.deps import CreateNoteDep, ListQueryDep, NoteIdDep, StoreDep, UpdateNoteDep
from quicknotes.web.openapi import DataResponse, ErrorResponse, ListResponse

router: APIRouter = APIRouter(prefix="/notes", tags=["notes"])


class CreateNoteRequest(BaseModel):
    """Request to create a new note. Only used to document the body, validation is done by hand."""

    title: str = Field(..., description="Note title, trimmed", max_length=TITLE_MAX_LENGTH)
    content: str = Field(..., description="Note content, trimmed", max_length=CONTENT_MAX_LENGTH)

    model_config = {"json_schema_extra": {"examples": [{"title": "Groceries", "content": "Milk, eggs, bread"}]}}


class UpdateNoteRequest(BaseModel):
    """Request to update a note (partial update)."""

    title: str | None = Field(None, description="New title", max_length=TITLE_MAX_LENGTH)
    content: str | None = Field(None, description="New content", max_length=CONTENT_MAX_LENGTH)

    model_config = {"json_schema_extra": {"examples": [{"title": "Updated title"}]}}


def _request_body(model: type[BaseModel]) -> dict[str, Any]:
    schema = {"schema": model.model_json_schema()}
    content = {"application/json": schema, "application/x-www-form-urlencoded": schema}
    return {"requestBody": {"required": True, "content": content}}


_LIST_PARAMETERS = [
    {"name": "page", "in": "query", "required": False, "schema": {"type": "integer", "minimum": 1, "default": 1}},
    {"name": "limit", "in": "query", "required": False, "schema": {"type": "integer", "minimum": 1, "maximum": 100, "default": 10}},
    {"name": "search", "in": "query", "required": False, "schema": {"type": "string"}},
]
_BAD_ID = {"model": ErrorResponse, "description": "Malformed note ID"}
_NOT_FOUND = {"model": ErrorResponse, "description": "Note not found"}


@router.post(
    "",
    summary="Create note",
    description="Create a note from a title (max 200 characters) and content (max 5000 characters). "
    "Both are trimmed and must not be empty.",
    operation_id="createNote",
    openapi_extra=_request_body(CreateNoteRequest),
    status_code=201,
    responses={
        201: {"description": "Note created successfully"},
        400: {"model": ErrorResponse, "description": "Invalid title or content"},
        413: {"model": ErrorResponse, "description": "Request body too large"},
    },
)
async def create_note(data: CreateNoteDep, store: StoreDep) -> DataResponse[Note]:
    return DataResponse[Note](data=handlers.create_note(store, data))


@router.get(
    "",
    summary="List notes",
    description="""Get a page of notes in creation order.

**Query parameters:**
- `page` - page number, starting at 1 (default 1)
- `limit` - items per page, 1 to 100 (default 10)
- `search` - case-insensitive substring matched against title and content

`pagination.total` counts the notes matching `search`.""",
    operation_id="listNotes",
    openapi_extra={"parameters": _LIST_PARAMETERS},
    responses={
        200: {"description": "Paginated list of notes"},
        400: {"model": ErrorResponse, "description": "Invalid query parameters"},
    },
)
async def list_notes(query: ListQueryDep, store: StoreDep) -> ListResponse[Note]:
    result = handlers.list_notes(store, query)
    return ListResponse[Note](data=result.items, pagination=result.pagination)


@router.get(
    "/{note_id}",
    summary="Get note",
    operation_id="getNote",
    responses={
        200: {"description": "Note details"},
        400: _BAD_ID,
        404: _NOT_FOUND,
    },
)
async def get_note(note_uuid: NoteIdDep, store: StoreDep) -> DataResponse[Note]:
    return DataResponse[Note](data=handlers.get_note(store, note_uuid))


@router.put(
    "/{note_id}",
    summary="Update note",
    description="Partially update a note. Only the supplied fields change, `updatedAt` is always refreshed.",
    operation_id="updateNote",
    openapi_extra=_request_body(UpdateNoteRequest),
    responses={
        200: {"description": "Note updated successfully"},
        400: {"model": ErrorResponse, "description": "Malformed note ID or invalid fields"},
        404: _NOT_FOUND,
        413: {"model": ErrorResponse, "description": "Request body too large"},
    },
)
async def update_note(note_uuid: NoteIdDep, data: UpdateNoteDep, store: StoreDep) -> DataResponse[Note]:
    return DataResponse[Note](data=handlers.update_note(store, note_uuid, data))


@router.delete(
    "/{note_id}",
    summary="Delete note",
    description="Delete a note permanently and return its last stored value.",
    operation_id="deleteNote",
    responses={
        200: {"description": "Note deleted successfully"},
        400: _BAD_ID,
        404: _NOT_FOUND,
    },
)
async def delete_note(note_uuid: NoteIdDep, store: StoreDep) -> DataResponse[Note]:
    return DataResponse[Note](data=handlers.delete_note(store, note_uuid))
