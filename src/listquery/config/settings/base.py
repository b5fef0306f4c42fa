"""Config settings – Settings base dataclass."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which runs
    after construction however the instance was built.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return "_".join(part for part in (cls._prefix, field_name) if part).upper()

    def _validate(self) -> None:
        pass


__all__ = ["Settings"]
