"""Core schemas for the application."""

import math
from typing import Generic, List, TypeVar

from pydantic import BaseModel

from components.core.errors import ValidationError

T = TypeVar("T")

MAX_PAGE_SIZE = 100


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of a larger result set."""
    items: List[T]
    total_items: int
    total_pages: int
    current_page: int
    page_size: int

    @classmethod
    def build(cls, items: List[T], total_items: int, page: int, size: int) -> "PaginatedResponse[T]":
        return cls(
            items=items,
            total_items=total_items,
            total_pages=math.ceil(total_items / size),
            current_page=page,
            page_size=size,
        )


def validate_pagination(page: int, size: int) -> int:
    """Check paging parameters and return the row offset."""
    if page < 1:
        raise ValidationError("Page must be a positive integer.")
    if size < 1:
        raise ValidationError("Size must be a positive integer.")
    if size > MAX_PAGE_SIZE:
        raise ValidationError(f"Size cannot exceed {MAX_PAGE_SIZE}.")
    return (page - 1) * size
