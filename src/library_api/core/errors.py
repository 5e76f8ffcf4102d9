"""Domain errors raised by the book service and translated at the HTTP boundary."""

DUPLICATE_ISBN_MESSAGE = "Isbn já foi cadastrado"
BOOK_NOT_FOUND_MESSAGE = "Book not found"


class LibraryError(Exception):
    """Base class for errors raised by the library domain."""


class DuplicateIsbnError(LibraryError):
    """A book with the same ISBN is already stored."""

    def __init__(self, isbn: str | None = None) -> None:
        super().__init__(DUPLICATE_ISBN_MESSAGE)
        self.isbn = isbn


class BookNotFoundError(LibraryError):
    """No book is stored under the requested id."""

    def __init__(self, book_id: int) -> None:
        super().__init__(BOOK_NOT_FOUND_MESSAGE)
        self.book_id = book_id


class BookValidationError(LibraryError):
    """One or more required fields are missing or blank."""

    def __init__(self, violations: list[tuple[str, str]]) -> None:
        super().__init__("; ".join(message for _, message in violations))
        self.violations = violations

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.violations]


class InvalidArgumentError(LibraryError, ValueError):
    """Internal contract violation, e.g. a missing id where one is required."""
