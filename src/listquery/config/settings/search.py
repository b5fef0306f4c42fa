"""Config settings – SearchSettings for the filter engine."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from listquery.config.errors import InvalidSettingValueError
from listquery.config.settings.base import Settings
from listquery.kernel.fields import DELETE_FIELD_CANDIDATES, ID_FIELD_CANDIDATES

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass
class SearchSettings(Settings):
    """Tunables of the query engine, loadable from ``LISTQUERY_*`` variables."""

    _prefix: ClassVar[str] = "LISTQUERY"

    delete_field_candidates: list[str] = dataclasses.field(
        default_factory=lambda: list(DELETE_FIELD_CANDIDATES)
    )
    id_field_candidates: list[str] = dataclasses.field(
        default_factory=lambda: list(ID_FIELD_CANDIDATES)
    )
    autocomplete_field: str = "AutocompleteSearch"
    range_separator: str = "%"
    list_separator: str = ","
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not self.range_separator:
            raise InvalidSettingValueError("range_separator", self.range_separator, "must not be empty")
        if not self.list_separator:
            raise InvalidSettingValueError("list_separator", self.list_separator, "must not be empty")
        if not self.autocomplete_field:
            raise InvalidSettingValueError("autocomplete_field", self.autocomplete_field, "must not be empty")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, f"expected one of {_LOG_LEVELS}")


__all__ = ["SearchSettings"]
