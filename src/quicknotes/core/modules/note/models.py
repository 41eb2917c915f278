from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from quicknotes.core.models import CamelModel
from quicknotes.utils import now

TITLE_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 5000

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class Note(CamelModel):
    """Stored note. Instances are immutable, an update produces a new copy."""

    id: UUID = Field(default_factory=uuid4)
    title: str
    content: str
    created_at: datetime = Field(default_factory=now)
    updated_at: datetime = Field(default_factory=now)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                    "title": "Groceries",
                    "content": "Milk, eggs, bread",
                    "createdAt": "2025-01-15T12:00:00Z",
                    "updatedAt": "2025-01-15T12:00:00Z",
                }
            ]
        },
    )


class NoteCreate(BaseModel):
    """Normalized input for creating a note."""

    title: str
    content: str


class NoteUpdate(BaseModel):
    """Normalized input for a partial update. None means the field is left unchanged."""

    title: str | None = None
    content: str | None = None

    def changes(self) -> dict[str, str]:
        return self.model_dump(exclude_none=True)


class ListNotesQuery(BaseModel):
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    search: str | None = None
