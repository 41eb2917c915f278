"""Tests for note request validators."""

from uuid import UUID

import pytest

from quicknotes.core.modules.note.validators import (
    validate_create_payload,
    validate_list_query,
    validate_note_id,
    validate_update_payload,
)
from quicknotes.errors import ApiError, ErrorKind


def assert_bad_request(excinfo: pytest.ExceptionInfo[ApiError], message: str) -> None:
    assert excinfo.value.kind is ErrorKind.VALIDATION
    assert excinfo.value.status_code == 400
    assert excinfo.value.message == message


class TestValidateCreatePayload:
    """Tests for create body validation."""

    def test_valid_payload_is_trimmed_in_place(self):
        payload = {"title": "  Title  ", "content": "\tContent\n", "extra": 1}
        data = validate_create_payload(payload)
        assert data.title == "Title"
        assert data.content == "Content"
        assert payload == {"title": "Title", "content": "Content"}

    @pytest.mark.parametrize(
        ("payload", "message"),
        [
            ({"content": "c"}, "Title is required"),
            ({"title": 5, "content": "c"}, "Title must be a string"),
            ({"title": None, "content": "c"}, "Title must be a string"),
            ({"title": "", "content": "c"}, "Title cannot be empty"),
            ({"title": "   ", "content": "c"}, "Title cannot be empty"),
            ({"title": "x" * 201, "content": "c"}, "Title must not exceed 200 characters"),
            ({"title": "t"}, "Content is required"),
            ({"title": "t", "content": ["c"]}, "Content must be a string"),
            ({"title": "t", "content": " \n "}, "Content cannot be empty"),
            ({"title": "t", "content": "x" * 5001}, "Content must not exceed 5000 characters"),
        ],
    )
    def test_invalid_payload(self, payload, message):
        with pytest.raises(ApiError) as excinfo:
            validate_create_payload(payload)
        assert_bad_request(excinfo, message)

    def test_title_is_checked_before_content(self):
        with pytest.raises(ApiError) as excinfo:
            validate_create_payload({})
        assert_bad_request(excinfo, "Title is required")

    def test_length_is_measured_after_trimming(self):
        data = validate_create_payload({"title": "  " + "x" * 200 + "  ", "content": "c" * 5000})
        assert len(data.title) == 200
        assert len(data.content) == 5000

    def test_payload_untouched_on_failure(self):
        payload = {"title": " t ", "content": ""}
        with pytest.raises(ApiError):
            validate_create_payload(payload)
        assert payload == {"title": " t ", "content": ""}


class TestValidateUpdatePayload:
    """Tests for partial update body validation."""

    def test_requires_at_least_one_field(self):
        with pytest.raises(ApiError) as excinfo:
            validate_update_payload({"other": "x"})
        assert_bad_request(excinfo, "At least one field (title or content) must be provided")

    def test_title_only(self):
        payload = {"title": " New "}
        data = validate_update_payload(payload)
        assert data.title == "New"
        assert data.content is None
        assert data.changes() == {"title": "New"}
        assert payload == {"title": "New"}

    def test_content_only(self):
        data = validate_update_payload({"content": " Body "})
        assert data.changes() == {"content": "Body"}

    def test_both_fields(self):
        data = validate_update_payload({"title": "t", "content": "c"})
        assert data.changes() == {"title": "t", "content": "c"}

    @pytest.mark.parametrize(
        ("payload", "message"),
        [
            ({"title": 1}, "Title must be a string"),
            ({"title": None}, "Title must be a string"),
            ({"title": "  "}, "Title cannot be empty"),
            ({"title": "x" * 201}, "Title must not exceed 200 characters"),
            ({"content": False}, "Content must be a string"),
            ({"content": ""}, "Content cannot be empty"),
            ({"content": "x" * 5001}, "Content must not exceed 5000 characters"),
            ({"title": "", "content": ""}, "Title cannot be empty"),
        ],
    )
    def test_invalid_field(self, payload, message):
        with pytest.raises(ApiError) as excinfo:
            validate_update_payload(payload)
        assert_bad_request(excinfo, message)


class TestValidateNoteId:
    """Tests for note identifier validation."""

    def test_accepts_uuid(self):
        assert validate_note_id("3fa85f64-5717-4562-b3fc-2c963f66afa6") == UUID("3fa85f64-5717-4562-b3fc-2c963f66afa6")

    def test_accepts_uppercase_and_normalizes(self):
        note_id = validate_note_id("3FA85F64-5717-4562-B3FC-2C963F66AFA6")
        assert str(note_id) == "3fa85f64-5717-4562-b3fc-2c963f66afa6"

    def test_surrounding_whitespace_is_trimmed(self):
        assert validate_note_id(" 3fa85f64-5717-4562-b3fc-2c963f66afa6 ") == UUID("3fa85f64-5717-4562-b3fc-2c963f66afa6")

    @pytest.mark.parametrize(
        ("raw", "message"),
        [
            (None, "Note ID is required"),
            (123, "Note ID must be a string"),
            ("", "Note ID cannot be empty"),
            ("   ", "Note ID cannot be empty"),
            ("not-a-uuid", "Note ID must be a valid UUID"),
            ("3fa85f645717-4562-b3fc-2c963f66afa6", "Note ID must be a valid UUID"),
            ("3fa85f64-5717-4562-b3fc-2c963f66afa", "Note ID must be a valid UUID"),
            ("{3fa85f64-5717-4562-b3fc-2c963f66afa6}", "Note ID must be a valid UUID"),
            ("3fa85f6457174562b3fc2c963f66afa6", "Note ID must be a valid UUID"),
            ("zfa85f64-5717-4562-b3fc-2c963f66afa6", "Note ID must be a valid UUID"),
        ],
    )
    def test_rejects_invalid_id(self, raw, message):
        with pytest.raises(ApiError) as excinfo:
            validate_note_id(raw)
        assert_bad_request(excinfo, message)


class TestValidateListQuery:
    """Tests for list query validation."""

    def test_defaults(self):
        query = validate_list_query({})
        assert query.page == 1
        assert query.limit == 10
        assert query.search is None

    def test_parses_values(self):
        query = validate_list_query({"page": ["3"], "limit": [" 25 "], "search": ["  hello "]})
        assert query.page == 3
        assert query.limit == 25
        assert query.search == "hello"

    def test_accepts_plain_strings(self):
        query = validate_list_query({"page": "2", "limit": "100"})
        assert query.page == 2
        assert query.limit == 100

    def test_blank_search_means_no_search(self):
        assert validate_list_query({"search": ["   "]}).search is None

    @pytest.mark.parametrize("page", ["0", "-1", "abc", "1.5", "", "2abc", "1e3"])
    def test_invalid_page(self, page):
        with pytest.raises(ApiError) as excinfo:
            validate_list_query({"page": [page]})
        assert_bad_request(excinfo, "Page must be a positive integer")

    @pytest.mark.parametrize("limit", ["0", "101", "-5", "ten", "", "10.0"])
    def test_invalid_limit(self, limit):
        with pytest.raises(ApiError) as excinfo:
            validate_list_query({"limit": [limit]})
        assert_bad_request(excinfo, "Limit must be a positive integer between 1 and 100")

    @pytest.mark.parametrize(
        ("name", "message"),
        [
            ("page", "Page must be a string"),
            ("limit", "Limit must be a string"),
            ("search", "Search must be a string"),
        ],
    )
    def test_repeated_parameter_is_rejected(self, name, message):
        with pytest.raises(ApiError) as excinfo:
            validate_list_query({name: ["1", "2"]})
        assert_bad_request(excinfo, message)

    def test_page_is_checked_before_limit(self):
        with pytest.raises(ApiError) as excinfo:
            validate_list_query({"page": ["0"], "limit": ["0"]})
        assert_bad_request(excinfo, "Page must be a positive integer")
