"""SQLAlchemy adapter – SqlAlchemySearchRepository."""
from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from listquery.adapters.sqlalchemy.queryable import SqlAlchemyQuery
from listquery.adapters.sqlalchemy.schema import schema_for_model
from listquery.application.pagination import ListResponse
from listquery.application.search import SearchOrchestrator, SearchRequest
from listquery.kernel.errors import NotFoundError

T = TypeVar("T")


class SqlAlchemySearchRepository(Generic[T]):
    """Generic read repository that runs list searches for one mapped class.

    The search engine is synchronous; it runs on the session's connection
    through :meth:`AsyncSession.run_sync`.
    """

    def __init__(
        self,
        session: AsyncSession,
        model: type[T],
        orchestrator: SearchOrchestrator | None = None,
    ) -> None:
        self._session = session
        self._model = model
        self._schema = schema_for_model(model)
        self._orchestrator = orchestrator or SearchOrchestrator()

    async def search(self, request: SearchRequest) -> ListResponse[T]:
        return await self._session.run_sync(self._search, request)

    def _search(self, session: Session, request: SearchRequest) -> ListResponse[T]:
        query = SqlAlchemyQuery(session, self._model, schema=self._schema)
        return self._orchestrator.search(query, request).to_response()

    async def find_by_id(self, raw_id: str) -> T | None:
        """Look a non-deleted row up by its identifier field, parsing *raw_id*."""
        return await self._session.run_sync(self._find_by_id, raw_id)

    def _find_by_id(self, session: Session, raw_id: str) -> T | None:
        query = SqlAlchemyQuery(session, self._model, schema=self._schema)
        return self._orchestrator.find_by_id(query, raw_id)

    async def find_all(self) -> list[T]:
        result = await self._session.execute(select(self._model))
        return list(result.scalars().all())

    async def get_by_id(self, id: Any) -> T | None:  # noqa: A002
        return await self._session.get(self._model, id)

    async def get_or_raise(self, id: Any) -> T:  # noqa: A002
        obj = await self.get_by_id(id)
        if obj is None:
            raise NotFoundError(self._model.__name__, id)
        return obj


__all__ = ["SqlAlchemySearchRepository"]
