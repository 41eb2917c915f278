"""Validation of untrusted note input.

Every validator raises ApiError (400) at the first violation it finds.
Body validators also write the normalized values back into the payload so
anything reading it later only sees trimmed strings.
"""

from collections.abc import Mapping, Sequence
from typing import Any
from uuid import UUID

from quicknotes.core.modules.note.models import (
    CONTENT_MAX_LENGTH,
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    TITLE_MAX_LENGTH,
    ListNotesQuery,
    NoteCreate,
    NoteUpdate,
)
from quicknotes.errors import ApiError
from quicknotes.utils import is_digits, is_uuid

# (payload key, label used in messages, max length)
_TITLE = ("title", "Title", TITLE_MAX_LENGTH)
_CONTENT = ("content", "Content", CONTENT_MAX_LENGTH)

QueryParams = Mapping[str, str | Sequence[str]]


def validate_text_field(value: Any, label: str, max_length: int) -> str:
    """Check type, emptiness and length of a present field and return it trimmed."""
    if not isinstance(value, str):
        raise ApiError.bad_request(f"{label} must be a string")
    trimmed = value.strip()
    if not trimmed:
        raise ApiError.bad_request(f"{label} cannot be empty")
    if len(trimmed) > max_length:
        raise ApiError.bad_request(f"{label} must not exceed {max_length} characters")
    return trimmed


def validate_create_payload(payload: dict[str, Any]) -> NoteCreate:
    """Validate a create request body; title is checked before content.

    On success the payload is replaced by the trimmed title and content.
    """
    normalized: dict[str, str] = {}
    for key, label, max_length in (_TITLE, _CONTENT):
        if key not in payload:
            raise ApiError.bad_request(f"{label} is required")
        normalized[key] = validate_text_field(payload[key], label, max_length)

    payload.clear()
    payload.update(normalized)
    return NoteCreate(**normalized)


def validate_update_payload(payload: dict[str, Any]) -> NoteUpdate:
    """Validate a partial update body. At least one of title or content is required."""
    if "title" not in payload and "content" not in payload:
        raise ApiError.bad_request("At least one field (title or content) must be provided")

    normalized: dict[str, str] = {}
    for key, label, max_length in (_TITLE, _CONTENT):
        if key in payload:
            normalized[key] = validate_text_field(payload[key], label, max_length)

    payload.update(normalized)
    return NoteUpdate(**normalized)


def validate_note_id(raw: Any) -> UUID:
    """Validate a note identifier and return it as a UUID.

    Malformed ids are a client error (400), not a lookup miss.
    """
    if raw is None:
        raise ApiError.bad_request("Note ID is required")
    if not isinstance(raw, str):
        raise ApiError.bad_request("Note ID must be a string")
    value = raw.strip()
    if not value:
        raise ApiError.bad_request("Note ID cannot be empty")
    if not is_uuid(value):
        raise ApiError.bad_request("Note ID must be a valid UUID")
    return UUID(value)


def _single_value(params: QueryParams, name: str, label: str) -> str | None:
    value = params.get(name)
    if value is None or isinstance(value, str):
        return value
    values = list(value)
    if len(values) != 1:
        raise ApiError.bad_request(f"{label} must be a string")
    return values[0]


def _parse_positive_int(raw: str) -> int | None:
    value = raw.strip()
    if not is_digits(value):
        return None
    try:
        return int(value)
    except ValueError:  # exceeds the interpreter's int conversion digit limit
        return None


def validate_list_query(params: QueryParams) -> ListNotesQuery:
    """Validate list query parameters.

    Values arrive as raw strings; a parameter given more than once is
    rejected. An empty search after trimming means no search.
    """
    page = DEFAULT_PAGE
    raw_page = _single_value(params, "page", "Page")
    if raw_page is not None:
        parsed = _parse_positive_int(raw_page)
        if parsed is None or parsed < 1:
            raise ApiError.bad_request("Page must be a positive integer")
        page = parsed

    limit = DEFAULT_LIMIT
    raw_limit = _single_value(params, "limit", "Limit")
    if raw_limit is not None:
        parsed = _parse_positive_int(raw_limit)
        if parsed is None or not 1 <= parsed <= MAX_LIMIT:
            raise ApiError.bad_request(f"Limit must be a positive integer between 1 and {MAX_LIMIT}")
        limit = parsed

    search = _single_value(params, "search", "Search")
    if search is not None:
        search = search.strip() or None

    return ListNotesQuery(page=page, limit=limit, search=search)
