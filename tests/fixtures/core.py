from __future__ import annotations

from collections.abc import Generator

import pytest
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from src.library_api.core.services.database.db_session import DbSessionService

# Models are imported within fixtures to control timing


@pytest.fixture
def engine() -> Generator[Engine]:
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from src.library_api.entities.service.book import BookTable  # noqa: F401

    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a database session bound to the per-test engine."""
    with Session(engine) as session:
        try:
            yield session
        finally:
            session.rollback()
            session.close()


@pytest.fixture
def database_service(engine: Engine) -> DbSessionService:
    """Database service sharing the per-test in-memory engine."""
    return DbSessionService(engine=engine)
