"""Book repository: the record store for books."""

from loguru import logger
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from src.library_api.core.errors import DuplicateIsbnError
from src.library_api.core.models.page import Page, PageRequest
from src.library_api.entities.service.book.entity import Book, BookCriteria
from src.library_api.entities.service.book.table import BookTable


class BookRepository:
    """Data-access layer for books."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def exists_by_isbn(self, isbn: str) -> bool:
        statement = select(BookTable.id).where(BookTable.isbn == isbn)
        return self._session.exec(statement).first() is not None

    def find_by_id(self, book_id: int) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def save(self, book: Book) -> Book:
        """Insert ``book`` when it has no id, otherwise overwrite the row with its id.

        Raises:
            DuplicateIsbnError: the unique index on ``isbn`` rejected the write.
        """
        row = self._session.get(BookTable, book.id) if book.id is not None else None
        if row is None:
            row = BookTable(id=book.id, title=book.title, author=book.author, isbn=book.isbn)
        else:
            row.title = book.title
            row.author = book.author
            row.isbn = book.isbn

        self._session.add(row)
        try:
            self._session.flush()
        except IntegrityError as exc:
            self._session.rollback()
            logger.warning("Store rejected book with duplicate isbn {}", book.isbn)
            raise DuplicateIsbnError(book.isbn) from exc

        self._session.refresh(row)
        return Book.model_validate(row, from_attributes=True)

    def delete_by_id(self, book_id: int) -> None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return
        self._session.delete(row)
        self._session.flush()

    def find_all(self, criteria: BookCriteria, page: PageRequest) -> Page[Book]:
        """Return the page of books matching every non-null criteria field.

        Matching is case-insensitive substring containment.
        """
        conditions = [
            col(getattr(BookTable, name)).icontains(value, autoescape=True)
            for name, value in criteria.active_filters().items()
        ]

        count_statement = select(func.count()).select_from(BookTable).where(*conditions)
        total = self._session.exec(count_statement).one()

        statement = (
            select(BookTable)
            .where(*conditions)
            .order_by(col(BookTable.id))
            .offset(page.offset)
            .limit(page.size)
        )
        rows = self._session.exec(statement).all()

        return Page[Book].of(
            [Book.model_validate(row, from_attributes=True) for row in rows],
            total,
            page,
        )
