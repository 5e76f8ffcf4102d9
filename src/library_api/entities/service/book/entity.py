"""Entity: Book."""

from typing import Any

from pydantic import BaseModel, Field

from src.library_api.entities.core._base import Entity


class Book(Entity):
    """Book entity representing a catalog record.

    This is the domain model handed between the service and the record store.
    It inherits from Entity to get the store-assigned identifier.
    """

    title: str = Field(description="Title")
    author: str = Field(description="Author")
    isbn: str = Field(description="ISBN, unique across the catalog")

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.author == other.author
            and self.isbn == other.isbn
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.title,
            self.author,
            self.isbn,
        ))


class BookCriteria(BaseModel):
    """Search criteria for books.

    Every non-null field must be contained, case-insensitively, in the
    corresponding stored field. Null fields match anything.
    """

    title: str | None = None
    author: str | None = None
    isbn: str | None = None

    def active_filters(self) -> dict[str, str]:
        """Return only the criteria that constrain the search."""
        return {
            name: value
            for name, value in self.model_dump().items()
            if value is not None
        }
