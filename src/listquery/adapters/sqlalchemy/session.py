"""SQLAlchemy adapter – SqlAlchemySessionFactory."""
from __future__ import annotations

from typing import Any

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine


class SqlAlchemySessionFactory:
    """Owns one async engine and hands out sessions bound to it.

    Sessions keep loaded attributes after commit so search results stay
    readable once the unit of work is over.
    """

    def __init__(self, database_url: str, *, echo: bool = False, **engine_kwargs: Any) -> None:
        self._engine = create_async_engine(database_url, echo=echo, **engine_kwargs)
        self._sessions = async_sessionmaker(self._engine, expire_on_commit=False)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def __call__(self) -> AsyncSession:
        return self._sessions()

    async def create_schema(self, metadata: MetaData) -> None:
        """Create every table of *metadata* that does not exist yet."""
        async with self._engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

    async def dispose(self) -> None:
        await self._engine.dispose()


__all__ = ["SqlAlchemySessionFactory"]
