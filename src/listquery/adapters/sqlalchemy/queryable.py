"""SQLAlchemy adapter – SqlAlchemyQuery, a Queryable over a Select."""
from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from listquery.adapters.sqlalchemy.predicate import compile_predicate
from listquery.adapters.sqlalchemy.schema import schema_for_model
from listquery.kernel.ddd import BaseSpecification
from listquery.kernel.fields import EntitySchema, FieldAccessor

T = TypeVar("T")


class SqlAlchemyQuery(Generic[T]):
    """Queryable backed by a synchronous :class:`~sqlalchemy.orm.Session`.

    Transformations only extend the underlying ``Select``; ``count`` and
    ``all`` execute it.
    """

    def __init__(
        self,
        session: Session,
        model: type[T],
        *,
        schema: EntitySchema | None = None,
        stmt: Select[Any] | None = None,
    ) -> None:
        self._session = session
        self._model = model
        self._schema = schema or schema_for_model(model)
        self._stmt = stmt if stmt is not None else select(model)

    @property
    def schema(self) -> EntitySchema:
        return self._schema

    @property
    def statement(self) -> Select[Any]:
        return self._stmt

    def _derive(self, stmt: Select[Any]) -> "SqlAlchemyQuery[T]":
        return SqlAlchemyQuery(self._session, self._model, schema=self._schema, stmt=stmt)

    def where(self, spec: BaseSpecification[Any]) -> "SqlAlchemyQuery[T]":
        return self._derive(self._stmt.where(compile_predicate(spec, self._model)))

    def order_by(self, field: FieldAccessor, ascending: bool = True) -> "SqlAlchemyQuery[T]":
        column = getattr(self._model, field.attr)
        order = column.asc().nulls_first() if ascending else column.desc().nulls_last()
        return self._derive(self._stmt.order_by(None).order_by(order))

    def slice(self, skip: int, take: int) -> "SqlAlchemyQuery[T]":
        return self._derive(self._stmt.offset(skip).limit(take))

    def count(self) -> int:
        return self._session.scalar(select(func.count()).select_from(self._stmt.subquery())) or 0

    def all(self) -> list[T]:
        return list(self._session.scalars(self._stmt).all())


__all__ = ["SqlAlchemyQuery"]
