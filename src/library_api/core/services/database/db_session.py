"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from src.library_api.runtime.config.config_data import DatabaseConfig
from src.library_api.runtime.context import get_config


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None, engine: Engine | None = None):
        """Initialize the shared database engine and session factory.

        An existing ``engine`` can be handed in (tests bind an in-memory one).
        """
        main_config = get_config()
        self._db_config = db_config or main_config.database

        if engine is not None:
            self._engine = engine
            return

        logger.info(
            "Configuring database engine for environment: {}", main_config.app.environment
        )
        engine_kwargs = {
            "echo": self._db_config.echo,
            "connect_args": self._get_connect_args(main_config.app.environment),
        }
        if not self._db_config.is_sqlite:
            engine_kwargs.update(
                {
                    "pool_size": self._db_config.pool_size,
                    "max_overflow": self._db_config.max_overflow,
                    "pool_timeout": self._db_config.pool_timeout,
                    "pool_recycle": self._db_config.pool_recycle,
                    "pool_pre_ping": True,
                }
            )

        self._engine = create_engine(self._db_config.connection_string, **engine_kwargs)

    @property
    def engine(self) -> Engine:
        return self._engine

    def _get_connect_args(self, environment: str) -> dict:
        """Get database-specific connection arguments."""
        connect_args = {}

        if self._db_config.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,  # sessions cross FastAPI's threadpool
                    "timeout": 20,  # lock timeout
                }
            )

            if environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )

        return connect_args

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session, committing on success and rolling back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            if isinstance(e, SQLAlchemyError):
                logger.bind(error_type=type(e).__name__).error(
                    "Database transaction failed: {}", e
                )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError as e:
            logger.bind(error_type=type(e).__name__).error(
                "Database health check failed: {}", e
            )
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self._engine.pool
        return {
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }
