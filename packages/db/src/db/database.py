# This project was developed with assistance from AI tools.
"""Async engine, session factory, and declarative base.

The engine's connection pool is the bounded worker pool for persistence:
every repository coroutine borrows one connection for its unit of work,
so ``DB_POOL_SIZE + DB_MAX_OVERFLOW`` caps concurrent store access.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from .config import db_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by every ORM model."""


engine = create_async_engine(
    db_settings.DATABASE_URL,
    echo=db_settings.SQL_ECHO,
    pool_size=db_settings.DB_POOL_SIZE,
    max_overflow=db_settings.DB_MAX_OVERFLOW,
    pool_pre_ping=True,
)

SessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


class DatabaseService:
    """Owns an engine and hands out sessions bound to it."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session, rolling back if the unit of work raises."""
        async with self._session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def dispose(self) -> None:
        logger.info("Disposing database engine")
        await self.engine.dispose()


db_service = DatabaseService(engine=engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session from the module-level factory."""
    async with SessionLocal() as session:
        yield session


def get_db_service() -> DatabaseService:
    return db_service
