"""Paging models for bounded query results."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")
U = TypeVar("U")


class PageRequest(BaseModel):
    """Zero-based page number and page size."""

    page: int = Field(default=0, ge=0, description="Zero-based page number")
    size: int = Field(default=10, ge=1, description="Number of items per page")

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """A slice of query results plus total-count/page-number/page-size metadata."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[T] = Field(default_factory=list)
    total_elements: int = Field(alias="totalElements", ge=0)
    total_pages: int = Field(alias="totalPages", ge=0)
    number: int = Field(ge=0)
    size: int = Field(ge=1)

    @classmethod
    def of(cls, content: list[T], total_elements: int, request: PageRequest) -> Page[T]:
        """Build a page for ``request`` holding ``content`` out of ``total_elements``."""
        return cls(
            content=content,
            total_elements=total_elements,
            total_pages=math.ceil(total_elements / request.size),
            number=request.page,
            size=request.size,
        )

    def map(self, func: Callable[[T], U]) -> Page[U]:
        """Return a page with ``func`` applied to every item of the content."""
        return Page(
            content=[func(item) for item in self.content],
            total_elements=self.total_elements,
            total_pages=self.total_pages,
            number=self.number,
            size=self.size,
        )
