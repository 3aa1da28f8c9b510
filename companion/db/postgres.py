"""PostgreSQL Database Configuration"""
from typing import AsyncGenerator
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from companion.config import get_settings
from companion.db.base import Base


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine for `database_url`.

    Postgres connections are opened per session (NullPool), leaving pooling to
    the backend's connection pooler. An in-memory SQLite database is a single
    shared connection, otherwise every session would see an empty database.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(url, echo=echo, poolclass=NullPool)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


settings = get_settings()
engine = build_engine(settings.database_url, echo=settings.db_echo)
async_session = build_session_factory(engine)

__all__ = ["Base", "engine", "async_session", "build_engine", "build_session_factory", "get_db"]


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session."""
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
