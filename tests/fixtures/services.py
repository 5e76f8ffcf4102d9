"""Service fixtures for testing."""

from __future__ import annotations

from collections.abc import Generator
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from src.library_api.api.http.app_data import ApplicationDependencies
from src.library_api.core.services import BookService, DbSessionService
from src.library_api.entities.service.book import BookRepository


@pytest.fixture
def book_repository(session: Session) -> BookRepository:
    """Record store backed by the in-memory database."""
    return BookRepository(session)


@pytest.fixture
def book_service(book_repository: BookRepository) -> BookService:
    """Book service over the real in-memory record store."""
    return BookService(book_repository)


@pytest.fixture
def mock_book_repository() -> Mock:
    """Get a mocked record store for isolated service tests."""
    return Mock(spec=BookRepository)


@pytest.fixture
def isolated_book_service(mock_book_repository: Mock) -> BookService:
    """Book service over a mocked record store."""
    return BookService(mock_book_repository)


@pytest.fixture
def client(database_service: DbSessionService) -> Generator[TestClient]:
    """HTTP client for the app wired to the per-test in-memory database."""
    from src.library_api.api.http.app import app

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service
    )
    try:
        yield TestClient(app)
    finally:
        app.state.app_dependencies = None
        app.dependency_overrides = {}
