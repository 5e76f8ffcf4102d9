from loguru import logger

from src.library_api.core.errors import DuplicateIsbnError, InvalidArgumentError
from src.library_api.core.models.page import Page, PageRequest
from src.library_api.entities.service.book import Book, BookCriteria, BookRepository


class BookService:
    """Business rules around book persistence.

    Enforces ISBN uniqueness and the id checks; everything else is delegated
    to the record store.
    """

    def __init__(self, repository: BookRepository) -> None:
        self._repository = repository

    def save(self, book: Book) -> Book:
        """Persist a new book.

        Raises:
            DuplicateIsbnError: a book with the same ISBN already exists.
        """
        if self._repository.exists_by_isbn(book.isbn):
            logger.info("Rejected book with duplicate isbn {}", book.isbn)
            raise DuplicateIsbnError(book.isbn)

        saved = self._repository.save(book)
        logger.info("Created book {} (isbn {})", saved.id, saved.isbn)
        return saved

    def get_by_id(self, book_id: int) -> Book | None:
        return self._repository.find_by_id(book_id)

    def update(self, book: Book | None) -> Book:
        """Overwrite the stored book that has ``book.id``.

        Raises:
            InvalidArgumentError: ``book`` is None or has no id.
        """
        if book is None or book.id is None:
            raise InvalidArgumentError("Book cannot be null and must have an id")

        updated = self._repository.save(book)
        logger.info("Updated book {}", updated.id)
        return updated

    def delete(self, book_id: int | None) -> None:
        """Remove the book with ``book_id``; missing ids are a no-op.

        Raises:
            InvalidArgumentError: ``book_id`` is None.
        """
        if book_id is None:
            raise InvalidArgumentError("Id cannot be null")

        self._repository.delete_by_id(book_id)
        logger.info("Deleted book {}", book_id)

    def find(self, criteria: BookCriteria, page: PageRequest) -> Page[Book]:
        result = self._repository.find_all(criteria, page)
        logger.debug(
            "Book search {} page={} size={} matched {}",
            criteria.active_filters(),
            page.page,
            page.size,
            result.total_elements,
        )
        return result
