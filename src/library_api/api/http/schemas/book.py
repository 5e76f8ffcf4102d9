"""Wire representations of a book."""

from pydantic import BaseModel, Field

from src.library_api.entities.service.book import Book


class BookRequest(BaseModel):
    """Create payload.

    Fields are optional at parse time so blank or missing values reach the
    explicit validator and come back as per-field messages.
    """

    title: str | None = Field(default=None, examples=["Hobbit"])
    author: str | None = Field(default=None, examples=["Tolkien"])
    isbn: str | None = Field(default=None, examples=["123123"])

    def to_entity(self) -> Book:
        return Book(title=self.title, author=self.author, isbn=self.isbn)


class BookUpdateRequest(BaseModel):
    """Update payload. Any ``isbn`` sent by the client is ignored."""

    title: str | None = None
    author: str | None = None


class BookResponse(BaseModel):
    id: int | None = None
    title: str
    author: str
    isbn: str

    @classmethod
    def from_entity(cls, book: Book) -> "BookResponse":
        return cls(id=book.id, title=book.title, author=book.author, isbn=book.isbn)
