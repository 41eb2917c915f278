from typing import Any, Literal

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

from quicknotes.core.pagination import Pagination

API_TITLE = "QuickNotes API"
API_VERSION = "0.1.0"


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title=API_TITLE,
            version=API_VERSION,
            summary="In-memory notes service with paginated search",
            routes=app.routes,
        )

        # Every error body shares the same envelope, FastAPI's 422 schema is never returned
        for path_item in openapi_schema["paths"].values():
            for operation in path_item.values():
                operation.get("responses", {}).pop("422", None)

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class DataResponse[T](BaseModel):
    """Success envelope around a single payload."""

    success: Literal[True] = True
    data: T


class ListResponse[T](BaseModel):
    """Success envelope around a page of items, pagination is a sibling of data."""

    success: Literal[True] = True
    data: list[T]
    pagination: Pagination


class ErrorDetail(BaseModel):
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: Literal[False] = False
    error: ErrorDetail

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"success": False, "error": {"message": "Title cannot be empty"}},
                {"success": False, "error": {"message": "Note with ID 3fa85f64-5717-4562-b3fc-2c963f66afa6 not found"}},
            ]
        }
    }
