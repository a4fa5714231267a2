"""Database Session Manager — bounded async connection pool with explicit lifecycle.

Invariants:
    - One manager per process, created in the lifespan startup and stored on app.state
    - Pool holds at most pool_size + max_overflow connections; extra requests wait
      up to pool_timeout seconds for a connection to be returned
    - Every session rolls back on exception and is closed on exit
    - close() disposes the engine: idle connections close immediately,
      checked-out connections close as they are returned

Design Decisions:
    - Manager injected through the get_db dependency (read from app.state),
      never imported as a module global by handlers
    - expire_on_commit=False: rows stay readable after commit in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Owns the async engine and hands out pooled sessions."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 0,
        pool_timeout: float = 30.0,
    ):
        engine_kwargs = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a pooled session with rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness checks)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        """Drain the pool and close every connection."""
        await self.engine.dispose()
        logger.info("Database pool closed")


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    """Create the process-wide session manager."""
    manager = DatabaseSessionManager(database_url, **kwargs)
    logger.info("Database pool initialized")
    return manager


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    manager: DatabaseSessionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if manager is None:
        raise RuntimeError("Database not initialized")
    async with manager.session() as session:
        yield session
