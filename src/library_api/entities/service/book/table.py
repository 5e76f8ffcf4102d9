"""Book database table model."""

from sqlmodel import Field

from src.library_api.entities.core._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    The unique index on ``isbn`` backs the service-level uniqueness check so
    two concurrent creates cannot both succeed.
    """

    __tablename__ = "books"

    title: str
    author: str
    isbn: str = Field(unique=True, index=True)
