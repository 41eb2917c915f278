import math

from pydantic import BaseModel, Field

from quicknotes.core.models import CamelModel


class Pagination(CamelModel):
    """Page-number pagination block returned next to list payloads."""

    page: int = Field(..., description="Current page number (1-based)", ge=1)
    limit: int = Field(..., description="Maximum items per page", ge=1)
    total: int = Field(..., description="Total number of items across all pages", ge=0)
    total_pages: int = Field(..., description="Number of pages for the given limit", ge=0)

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, total_pages=math.ceil(total / limit))


class PaginationResult[T](BaseModel):
    """Pagination result wrapper for list operations."""

    items: list[T] = Field(..., description="List of items in current page")
    pagination: Pagination

    @property
    def has_more(self) -> bool:
        """Whether there are more pages after the current one."""
        return self.pagination.page < self.pagination.total_pages
