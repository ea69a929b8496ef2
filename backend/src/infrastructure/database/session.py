"""Async SQLAlchemy engine and session management."""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from infrastructure.config import get_settings, get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base of every ORM model."""


def create_engine_from_settings() -> AsyncEngine:
    """
    Create the async engine described by the settings.

    SQLite databases (local runs and tests) do not take pool sizes; an
    in-memory SQLite database is kept on a single shared connection.
    """
    settings = get_settings()

    if settings.uses_sqlite:
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in settings.database_url:
            kwargs["poolclass"] = StaticPool
        return create_async_engine(settings.database_url, echo=settings.database_echo, **kwargs)

    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
    )


engine = create_engine_from_settings()

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide a session scoped to one unit of work.

    Commits when the consumer finishes normally, rolls back otherwise.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create the tables that do not exist yet."""
    # Register every model on the metadata
    from infrastructure.database import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


async def close_db() -> None:
    """Release every pooled connection."""
    await engine.dispose()
    logger.info("Database connections closed")
