"""Core services exports."""

from .book.book_service import BookService
from .database.db_session import DbSessionService

__all__ = [
    "BookService",
    "DbSessionService",
]
