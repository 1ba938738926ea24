"""Async engine and session factory for the credential store.

Handlers get a request-scoped AsyncSession from the container and decide
when to commit; this module only opens, rolls back and closes.

URLs:
    - postgresql+asyncpg://... in deployments
    - sqlite+aiosqlite:///... in tests and local runs
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

_POSTGRES_CONNECT_ARGS = {
    "server_settings": {"jit": "off"},
    "command_timeout": 60,
    "timeout": 30,
}


def _build_engine(
    database_url: str, *, echo: bool, pool_size: int, max_overflow: int
) -> AsyncEngine:
    if database_url.startswith("sqlite"):
        # aiosqlite connections are not shared across event loops
        return create_async_engine(database_url, echo=echo, poolclass=NullPool)

    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=pool_size,
        max_overflow=max_overflow,
        connect_args=_POSTGRES_CONNECT_ARGS if "postgresql" in database_url else {},
    )


class Database:
    """Owns the engine and hands out sessions.

    Usage:
        db = Database("sqlite+aiosqlite:///./credentials.db")
        async with db.get_session() as session:
            accounts = AccountRepository(session)
            ...
            await session.commit()
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        """
        Args:
            database_url: Async SQLAlchemy URL.
            echo: Log every statement.
            pool_size: Pooled connections (PostgreSQL).
            max_overflow: Connections allowed above pool_size (PostgreSQL).
        """
        self.engine: AsyncEngine = _build_engine(
            database_url, echo=echo, pool_size=pool_size, max_overflow=max_overflow
        )
        # Committed entities stay readable after the handler commits
        self.async_session = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; roll back if the body raises."""
        async with self.async_session() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create the accounts table and the three token tables if missing."""
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop every mapped table. Tests only."""
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """True when SELECT 1 succeeds. Used by GET /health."""
        try:
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError):
            return False
        return True
