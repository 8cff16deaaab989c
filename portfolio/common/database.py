import contextlib
import os
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from portfolio.common.environment_constants import DATABASE_URL


class Database:
    def __init__(self, database_url: str | None = None, echo=False, **engine_options):
        """
        Initialize a Database instance.

        Args:
            database_url (str | None): SQLAlchemy async URL. Falls back to the
                DATABASE_URL environment variable when omitted.
            echo (bool): If True, SQLAlchemy will output executed SQL statements.
            **engine_options: Extra keyword arguments for create_async_engine
                (e.g. poolclass for in-memory SQLite).
        """
        self.database_url = database_url or os.getenv(DATABASE_URL)
        if not self.database_url:
            raise ValueError("DATABASE_URL must be set")
        self._engine = create_async_engine(
            self.database_url, echo=echo, **engine_options
        )
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            autoflush=False,
            expire_on_commit=False,
        )

    def get_engine(self):
        """
        Expose the underlying SQLAlchemy async engine.

        This is usually needed only for schema tooling such as tools/init_db.py.
        """
        return self._engine

    async def close(self):
        """
        Dispose the database engine.

        Typically called on application shutdown to cleanly close connection pools.
        """
        await self._engine.dispose()

    @contextlib.asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Provide a transactional session context manager.

        This handles session lifecycle automatically:
        - create session
        - yield it to the caller
        - rollback on error
        - close session at the end

        Note:
            Services commit explicitly after each write, so nothing is
            committed here.
        """
        session: AsyncSession = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
