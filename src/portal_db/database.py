# This project was developed with assistance from AI tools.
"""
Async engine and session management.

The engine is owned by whoever builds the ``DatabaseService`` (the FastAPI
lifespan in production, fixtures in tests). Nothing in this module holds a
process-wide connection pool.
"""

import logging
from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from .config import db_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class DatabaseService:
    """Engine + session factory for one application instance."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

    @classmethod
    def from_url(
        cls, url: str | None = None, *, echo: bool | None = None, **engine_kwargs
    ) -> "DatabaseService":
        """Build from an explicit URL, or from DATABASE_URL and friends in the environment."""
        url = url or db_settings.DATABASE_URL
        echo = db_settings.SQL_ECHO if echo is None else echo
        engine_kwargs.setdefault("pool_pre_ping", db_settings.DB_POOL_PRE_PING)
        return cls(create_async_engine(url, echo=echo, **engine_kwargs))

    async def create_schema(self) -> None:
        """Create all tables that do not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured (%d tables)", len(Base.metadata.tables))

    async def health_check(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.warning("Database health check failed: %s", exc)
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db_service(request: Request) -> DatabaseService:
    """FastAPI dependency: the DatabaseService attached to the running app."""
    service = getattr(request.app.state, "db_service", None)
    if service is None:
        raise RuntimeError("DatabaseService not initialised; is the lifespan running?")
    return service


async def get_db(
    db_service: DatabaseService = Depends(get_db_service),
) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency: a request-scoped session for read paths."""
    async with db_service.session_factory() as session:
        yield session
