import logging
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
    AsyncEngine,
)

from account_api.core.config import settings
from account_api.core.models import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# ----------------------------------------------------------------------
# 1. Database Manager Class
# ----------------------------------------------------------------------

class DatabaseManager:
    """
    Manages the SQLAlchemy AsyncEngine and the AsyncSession factory.

    Encapsulates database connection setup and session creation logic for
    the application. This centralizes configuration and allows tests to
    build a manager bound to a throwaway database.
    """

    def __init__(self, db_url: str, **engine_kwargs):
        """
        Initializes the DatabaseManager with the database connection URL.

        Args:
            db_url (str): The connection string for the asynchronous database driver.
            **engine_kwargs: Extra keyword arguments for create_async_engine
                (e.g. poolclass, connect_args).
        """
        engine_kwargs.setdefault("pool_pre_ping", True)
        # Set to True only for debugging generated SQL.
        engine_kwargs.setdefault("echo", False)

        self._engine: AsyncEngine = create_async_engine(db_url, **engine_kwargs)
        if self._engine.dialect.name == "sqlite":
            # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
            event.listen(self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self._async_session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            class_=AsyncSession,
            expire_on_commit=False,  # Prevents unnecessary loading of objects after a commit.
            autoflush=False,
            bind=self._engine,
        )

    @property
    def engine(self) -> AsyncEngine:
        """
        Provides access to the configured SQLAlchemy AsyncEngine.

        Returns:
            AsyncEngine: The configured engine instance.
        """
        return self._engine

    @property
    def async_session_factory(self) -> async_sessionmaker[AsyncSession]:
        """
        Provides access to the configured asynchronous session maker.

        Returns:
            async_sessionmaker[AsyncSession]: The session factory.
        """
        return self._async_session_factory

    async def create_all(self) -> None:
        """Create every mapped table that does not exist yet."""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def disconnect(self) -> None:
        """Dispose of the engine's connection pool."""
        await self._engine.dispose()


# Initialize the DatabaseManager with the URL from settings
db_manager = DatabaseManager(settings.ASYNC_DATABASE_URL)


# ----------------------------------------------------------------------
# 2. FastAPI Dependency
# ----------------------------------------------------------------------

async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The session is closed (and any pending transaction rolled back) when the
    request has finished, regardless of whether an exception occurred.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session bound to the database.
    """
    async with db_manager.async_session_factory() as session:
        yield session
