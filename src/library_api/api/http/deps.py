"""FastAPI dependency implementations.

Collaborators are wired explicitly per request: the session-scoped record
store is handed to the service, and the service to the route handler.
"""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.library_api.api.http.app_data import ApplicationDependencies
from src.library_api.core.services import BookService
from src.library_api.entities.service.book import BookRepository


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session committed when the request succeeds."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    with app_deps.database_service.session_scope() as session:
        yield session


def get_book_repository(session: Session = Depends(get_db_session)) -> BookRepository:
    """Get the book record store bound to the request's session."""
    return BookRepository(session)


def get_book_service(
    repository: BookRepository = Depends(get_book_repository),
) -> BookService:
    """Get the book service for the current request."""
    return BookService(repository)
