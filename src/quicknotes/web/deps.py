import json
from typing import Annotated, Any, cast
from uuid import UUID

from fastapi import Depends, Request

from quicknotes.app import App
from quicknotes.core.modules.note.models import ListNotesQuery, NoteCreate, NoteUpdate
from quicknotes.core.modules.note.store import NoteStore
from quicknotes.core.modules.note.validators import (
    validate_create_payload,
    validate_list_query,
    validate_note_id,
    validate_update_payload,
)
from quicknotes.errors import ApiError


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_store(app: Annotated[App, Depends(get_app)]) -> NoteStore:
    return app.store


JSON_MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"


def _media_type(request: Request) -> str:
    return request.headers.get("content-type", "").partition(";")[0].strip().lower()


async def _read_form(request: Request) -> dict[str, Any]:
    form = await request.form()
    fields: dict[str, Any] = {}
    for key in form:
        values = form.getlist(key)
        # Repeated fields keep every value so validators reject them as non-strings
        fields[key] = values[0] if len(values) == 1 else values
    return fields


async def read_body_object(request: Request, app: Annotated[App, Depends(get_app)]) -> dict[str, Any]:
    """Decode the request body into a field mapping.

    JSON bodies must hold an object and url-encoded forms become a plain dict.
    An empty body, or one with any other content type, counts as {}.
    """
    body = await request.body()
    if len(body) > app.config.max_body_size:
        raise ApiError.payload_too_large()
    if not body.strip():
        return {}

    media_type = _media_type(request)
    if media_type == FORM_MEDIA_TYPE:
        return await _read_form(request)
    if media_type != JSON_MEDIA_TYPE:
        return {}

    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        raise ApiError.bad_request("Request body must be valid JSON") from e

    if not isinstance(payload, dict):
        raise ApiError.bad_request("Request body must be a JSON object")
    return payload


RequestBody = Annotated[dict[str, Any], Depends(read_body_object)]


async def get_note_id(note_id: str) -> UUID:
    return validate_note_id(note_id)


async def get_create_input(payload: RequestBody) -> NoteCreate:
    return validate_create_payload(payload)


async def get_update_input(payload: RequestBody) -> NoteUpdate:
    return validate_update_payload(payload)


async def get_list_query(request: Request) -> ListNotesQuery:
    params = request.query_params
    return validate_list_query({key: params.getlist(key) for key in params})


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
StoreDep = Annotated[NoteStore, Depends(get_store)]
NoteIdDep = Annotated[UUID, Depends(get_note_id)]
CreateNoteDep = Annotated[NoteCreate, Depends(get_create_input)]
UpdateNoteDep = Annotated[NoteUpdate, Depends(get_update_input)]
ListQueryDep = Annotated[ListNotesQuery, Depends(get_list_query)]
