"""
Database engine and session management.

Provides async SQLAlchemy engine and session factory for FastAPI.
"""

import logging
from collections.abc import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from riftdex.config import Settings, settings
from riftdex.models.db import Base

logger = logging.getLogger(__name__)


def build_engine(config: Settings) -> AsyncEngine:
    """Create an async engine for the configured store."""
    return create_async_engine(
        config.database_url,
        echo=config.debug,
        pool_pre_ping=True,
        connect_args={"timeout": config.database_timeout},
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


# Process-wide engine used by the web app
engine = build_engine(settings)
async_session_factory = build_session_factory(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides a database session.

    Usage in FastAPI:
        @app.get("/items")
        async def get_items(session: AsyncSession = Depends(get_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            raise


async def init_db(bind: AsyncEngine | None = None) -> None:
    """
    Initialize database tables.

    Creates all tables and indexes defined in the ORM models.
    Should be called once at application startup.

    Args:
        bind: Engine to create tables on; defaults to the process engine
    """
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping(session: AsyncSession) -> bool:
    """Return True if the store answers a trivial query."""
    try:
        await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Store ping failed: %s", e)
        return False
    return True
