"""
Async engine and session factory for the obstacle store and audit trail.

One process-wide DatabaseManager. Status writes and background audit inserts
share the engine, so file-backed SQLite runs in WAL mode with a busy timeout
to let the two interleave instead of failing with "database is locked".
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

logger = logging.getLogger(__name__)

SQLITE_BUSY_TIMEOUT_MS = 5000


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _is_sqlite_memory(url: str) -> bool:
    return _is_sqlite(url) and (":memory:" in url or url.rstrip("/").endswith(":"))


class DatabaseManager:
    """Owns the async engine and hands out sessions."""

    def __init__(self, database_url: str) -> None:
        self._database_url = database_url
        self._engine: Optional[AsyncEngine] = None
        self._sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def database_url(self) -> str:
        return self._database_url

    async def init(self) -> None:
        """Create the engine and sessionmaker once; later calls are no-ops."""
        if self._engine is not None:
            return

        logger.info("Initializing async database engine")
        self._engine = create_async_engine(self._database_url, echo=False)

        if _is_sqlite(self._database_url):
            in_memory = _is_sqlite_memory(self._database_url)

            @event.listens_for(self._engine.sync_engine, "connect")
            def _set_sqlite_pragma(dbapi_connection, connection_record) -> None:  # type: ignore[override]  # pragma: no cover
                cursor = dbapi_connection.cursor()
                try:
                    cursor.execute("PRAGMA foreign_keys=ON")
                    if not in_memory:
                        cursor.execute("PRAGMA journal_mode=WAL")
                        cursor.execute(f"PRAGMA busy_timeout={SQLITE_BUSY_TIMEOUT_MS}")
                finally:
                    cursor.close()

        self._sessionmaker = async_sessionmaker(
            self._engine,
            expire_on_commit=False,
            class_=AsyncSession,
        )
        logger.info("Async database engine ready (sqlite=%s)", _is_sqlite(self._database_url))

    async def create_schema(self) -> None:
        """Create the obstacles and audit_logs tables if missing."""
        if self._engine is None:
            raise RuntimeError("DatabaseManager is not initialized. Call init() first.")
        import models  # noqa: F401  registers tables on Base.metadata
        from models.base import Base

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured: %s", ", ".join(sorted(Base.metadata.tables)))

    async def dispose(self) -> None:
        if self._engine is not None:
            logger.info("Disposing async database engine")
            await self._engine.dispose()
            self._engine = None
            self._sessionmaker = None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; commit on clean exit, roll back on error.

        Services that need the commit to happen before a side effect (the
        status write before its audit record) commit explicitly; the final
        commit here is then a no-op.
        """
        if self._sessionmaker is None:
            raise RuntimeError("DatabaseManager is not initialized. Call init() first.")

        session: AsyncSession = self._sessionmaker()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine


_db_manager: Optional[DatabaseManager] = None


async def init_database(database_url: str, *, create_schema: bool = False) -> None:
    """Initialize the process-wide DatabaseManager, optionally creating tables."""
    global _db_manager

    if _db_manager is None:
        _db_manager = DatabaseManager(database_url)
    await _db_manager.init()
    if create_schema:
        await _db_manager.create_schema()


async def dispose_database() -> None:
    global _db_manager

    if _db_manager is not None:
        await _db_manager.dispose()
        _db_manager = None


def get_database_manager() -> DatabaseManager:
    """Return the initialized DatabaseManager; raises before init_database()."""
    if _db_manager is None:
        raise RuntimeError("DatabaseManager is not initialized.")
    return _db_manager
