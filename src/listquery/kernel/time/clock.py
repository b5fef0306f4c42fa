"""Kernel time – clocks that supply "now" to date-window filters."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


def as_naive_local(moment: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock.

    Naive local time by default, comparable with entities that store naive
    datetimes; ``utc=True`` yields aware UTC values instead.
    """

    __slots__ = ("_tz",)

    def __init__(self, *, utc: bool = False) -> None:
        self._tz = UTC if utc else None

    def now(self) -> datetime:
        return datetime.now(self._tz)


class FrozenClock:
    """Clock pinned to *moment* until moved with :meth:`set` or :meth:`advance`."""

    __slots__ = ("_moment",)

    def __init__(self, moment: datetime) -> None:
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def set(self, moment: datetime) -> None:
        self._moment = moment

    def advance(self, delta: timedelta | None = None, **kwargs: float) -> datetime:
        self._moment += delta if delta is not None else timedelta(**kwargs)
        return self._moment


__all__ = ["Clock", "FrozenClock", "SystemClock", "as_naive_local"]
