"""Application search – SoftDeleteGuard."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from listquery.application.search.builders import build_equal
from listquery.application.search.queryable import Queryable
from listquery.kernel.ddd import BaseSpecification
from listquery.kernel.fields import DELETE_FIELD_CANDIDATES, EntitySchema
from listquery.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class SoftDeleteGuard:
    """Hides soft-deleted records when the entity exposes a delete flag.

    The flag is the first of *candidates* found on the schema; entities
    without one pass through untouched.
    """

    def __init__(self, candidates: Sequence[str] = DELETE_FIELD_CANDIDATES) -> None:
        self._candidates = tuple(candidates)

    def predicate(self, schema: EntitySchema) -> BaseSpecification[Any] | None:
        flag = schema.deleted_field(self._candidates)
        if flag is None:
            return None
        return build_equal(flag, "false")

    def apply(self, queryable: Queryable[T]) -> Queryable[T]:
        spec = self.predicate(queryable.schema)
        if spec is None:
            return queryable
        logger.debug("soft_delete_guard_applied", entity=queryable.schema.name)
        return queryable.where(spec)


__all__ = ["SoftDeleteGuard"]
