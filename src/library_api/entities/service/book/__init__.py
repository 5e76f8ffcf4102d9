"""Entity package: Book."""

from .entity import Book, BookCriteria
from .repository import BookRepository
from .table import BookTable

__all__ = ["Book", "BookCriteria", "BookRepository", "BookTable"]
