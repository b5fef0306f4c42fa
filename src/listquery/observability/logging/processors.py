"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def add_component(component: str) -> Any:
    """Return a structlog processor that stamps ``component`` on every event."""

    def _processor(
        logger: Any,           # noqa: ARG001
        method_name: str,      # noqa: ARG001
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        event_dict.setdefault("component", component)
        return event_dict

    return _processor


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["add_component", "get_logger"]
