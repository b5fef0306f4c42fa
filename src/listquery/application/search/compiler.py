"""Application search – FilterCompiler.

Turns the ordered ``key -> value`` filter mapping of a request into one
predicate: entries are ANDed in mapping order, keys whose prefix is not
recognised are dropped without error.
"""
from __future__ import annotations

import functools
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from listquery.application.search.builders import (
    Builder,
    build_contains,
    build_date_equal,
    build_date_from,
    build_date_range,
    build_date_to,
    build_datetime_from,
    build_datetime_to,
    build_equal,
    build_in,
    build_not_equal,
    build_not_in,
    build_null_test,
)
from listquery.application.search.operands import is_sentinel
from listquery.application.search.operators import (
    AUTOCOMPLETE_KEY,
    PREFIX_TABLE,
    FilterKey,
    OperatorKind,
    parse_key,
)
from listquery.application.search.queryable import Queryable
from listquery.application.search.soft_delete import SoftDeleteGuard
from listquery.config.settings import SearchSettings
from listquery.kernel.ddd import BaseSpecification, MatchAll
from listquery.kernel.errors import ParseError
from listquery.kernel.fields import EntitySchema
from listquery.kernel.time import Clock, SystemClock, as_naive_local
from listquery.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class FilterCompiler:
    """Compile filter mappings against any entity schema.

    Parameters
    ----------
    settings:
        Engine settings (delete-flag candidates, separators, autocomplete
        field). Defaults to :class:`SearchSettings` defaults.
    clock:
        Source of "now" for ``date_between_`` filters.
    prefix_table:
        Ordered ``(prefix, OperatorKind)`` pairs; earlier entries win ties.
    """

    def __init__(
        self,
        settings: SearchSettings | None = None,
        *,
        clock: Clock | None = None,
        prefix_table: Sequence[tuple[str, OperatorKind]] = PREFIX_TABLE,
    ) -> None:
        self._settings = settings or SearchSettings()
        self._clock = clock or SystemClock()
        self._prefix_table = tuple(prefix_table)
        self._guard = SoftDeleteGuard(self._settings.delete_field_candidates)
        separator = self._settings.list_separator
        self._builders: dict[OperatorKind, Builder] = {
            OperatorKind.STRING: build_contains,
            OperatorKind.DATE_FROM: build_date_from,
            OperatorKind.DATE_TO: build_date_to,
            OperatorKind.DATE_EQUAL: build_date_equal,
            OperatorKind.EQUAL: build_equal,
            OperatorKind.NOT_EQUAL: build_not_equal,
            OperatorKind.NOT_NULL: functools.partial(build_null_test, expect_null=False),
            OperatorKind.DATETIME_FROM: build_datetime_from,
            OperatorKind.DATETIME_TO: build_datetime_to,
            OperatorKind.IN: functools.partial(build_in, separator=separator),
            OperatorKind.NOT_IN: functools.partial(build_not_in, separator=separator),
        }

    @property
    def guard(self) -> SoftDeleteGuard:
        return self._guard

    def compile(self, queryable: Queryable[T], filter_mapping: Mapping[str, str] | None) -> tuple[Queryable[T], int]:
        """Guard, filter and count *queryable*; returns ``(queryable, filtered_count)``."""
        filtered = self.apply(queryable, filter_mapping)
        return filtered, filtered.count()

    def apply(self, queryable: Queryable[T], filter_mapping: Mapping[str, str] | None) -> Queryable[T]:
        """Guard and filter *queryable* without executing it."""
        guarded = self._guard.apply(queryable)
        if not filter_mapping:
            return guarded
        predicate = self.build_predicate(queryable.schema, filter_mapping)
        if isinstance(predicate, MatchAll):
            return guarded
        return guarded.where(predicate)

    def build_predicate(self, schema: EntitySchema, filter_mapping: Mapping[str, str]) -> BaseSpecification[Any]:
        """Fold every entry of *filter_mapping* into one predicate (guard excluded)."""
        result: BaseSpecification[Any] = MatchAll()
        for key, value in filter_mapping.items():
            spec = self._entry_predicate(schema, key, value)
            if spec is not None:
                result = result & spec
        return result

    def _entry_predicate(self, schema: EntitySchema, key: str, value: str) -> BaseSpecification[Any] | None:
        if key == AUTOCOMPLETE_KEY:
            return build_contains(schema.require(self._settings.autocomplete_field), value)

        filter_key = parse_key(key, self._prefix_table)
        if filter_key is None:
            logger.debug("filter_key_ignored", key=key, entity=schema.name)
            return None

        kind = filter_key.kind
        if kind in (OperatorKind.EQUAL, OperatorKind.NOT_EQUAL) and is_sentinel(value):
            logger.debug("filter_sentinel_skipped", key=key, entity=schema.name)
            return None
        if kind is OperatorKind.NOT_NULL and not value:
            return None
        if kind is OperatorKind.DATE_BETWEEN:
            return self._date_range(schema, filter_key, value)
        return self._builders[kind](schema.require(filter_key.field_ref), value)

    def _date_range(self, schema: EntitySchema, filter_key: FilterKey, value: str) -> BaseSpecification[Any]:
        names = filter_key.field_ref.split(self._settings.range_separator)
        if len(names) != 2:
            raise ParseError(
                filter_key.prefix + filter_key.field_ref,
                f"'<From>{self._settings.range_separator}<To>' field pair",
            )
        now = as_naive_local(self._clock.now())
        return build_date_range(schema.require(names[0]), schema.require(names[1]), value, now)


__all__ = ["FilterCompiler"]
