"""Application search – SearchRequest and SortSpec value objects."""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from listquery.kernel.errors import ValidationError

SORT_ASC = "ASC"
SORT_DESC = "DESC"


@dataclasses.dataclass(frozen=True)
class SortSpec:
    """``[field, direction]`` pair; anything but ``"ASC"`` sorts descending."""

    field: str
    direction: str = SORT_ASC

    @property
    def ascending(self) -> bool:
        return self.direction == SORT_ASC


@dataclasses.dataclass(frozen=True, eq=False)
class SearchRequest:
    """Read-only filter/sort/page request for one search call.

    ``page`` is zero-based. Paging applies only when both ``page`` and
    ``per_page`` are set. ``filter`` preserves insertion order.
    """

    page: int | None = None
    per_page: int | None = None
    sort: SortSpec | None = None
    filter: Mapping[str, str] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.page is not None and self.page < 0:
            raise ValueError("page must be >= 0")
        if self.per_page is not None and self.per_page < 1:
            raise ValueError("per_page must be >= 1")
        object.__setattr__(self, "filter", MappingProxyType(dict(self.filter)))

    @property
    def paged(self) -> bool:
        return self.page is not None and self.per_page is not None

    def with_filter_item(self, name: str, value: str) -> "SearchRequest":
        """Return a copy with one more filter entry; *name* must be new."""
        if name in self.filter:
            raise ValidationError.for_parameter(name, "filter entry already present")
        return dataclasses.replace(self, filter={**self.filter, name: value})

    def with_only_filter_item(self, name: str, value: str) -> "SearchRequest":
        """Return a copy whose filter holds exactly one entry."""
        return dataclasses.replace(self, filter={name: value})

    @classmethod
    def from_raw(
        cls,
        *,
        page: int | None = None,
        per_page: int | None = None,
        sort: str | None = None,
        filter: str | None = None,  # noqa: A002
    ) -> "SearchRequest":
        """Build a request from JSON-encoded query parameters.

        *sort* is a JSON array ``["field", "ASC"]``; any other shape means
        "no sort". *filter* is a JSON object whose values are coerced to
        strings.
        """
        return cls(
            page=page,
            per_page=per_page,
            sort=_decode_sort(sort),
            filter=_decode_filter(filter),
        )


def _loads(raw: str, name: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError.for_parameter(name, f"not valid JSON ({exc.msg})", cause=exc) from exc


def _decode_sort(raw: str | None) -> SortSpec | None:
    if not raw:
        return None
    obj = _loads(raw, "sort")
    if not isinstance(obj, list) or len(obj) != 2:
        return None
    return SortSpec(field=str(obj[0]), direction=str(obj[1]))


def _decode_filter(raw: str | None) -> dict[str, str]:
    if not raw:
        return {}
    obj = _loads(raw, "filter")
    if not isinstance(obj, dict):
        raise ValidationError.for_parameter("filter", f"expected a JSON object, got {type(obj).__name__}")
    return {str(k): _as_text(v) for k, v in obj.items()}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = ["SORT_ASC", "SORT_DESC", "SearchRequest", "SortSpec"]
