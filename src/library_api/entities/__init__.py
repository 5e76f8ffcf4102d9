"""Entities module with hybrid entity-centric structure.

Entities are organized by business concept rather than technical layer.
Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer (the record store)
"""

from .service.book import Book, BookCriteria, BookRepository, BookTable

__all__ = [
    "Book",
    "BookCriteria",
    "BookRepository",
    "BookTable",
]
