"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from listquery.observability.logging.processors import add_component


def _pre_chain(component: str | None) -> list[Any]:
    chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if component:
        chain.insert(0, add_component(component))
    return chain


def _install_root_handler(renderers: list[Any], level: int) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
        )
    )
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


class JsonLoggerFactory:
    """Route structlog events through stdlib logging, one JSON object per line.

    ``json_output=False`` swaps the renderer for structlog's console renderer,
    which is easier to read during local development.
    """

    @staticmethod
    def configure(
        level: int | str = logging.INFO,
        component: str | None = None,
        *,
        json_output: bool = True,
    ) -> None:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())

        structlog.configure(
            processors=[*_pre_chain(component), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        if json_output:
            renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        else:
            renderers = [structlog.dev.ConsoleRenderer(colors=False)]
        _install_root_handler(renderers, level)

    @staticmethod
    def from_settings(settings: Any, component: str | None = "listquery") -> None:
        """Configure from any settings object exposing ``log_level``."""
        JsonLoggerFactory.configure(settings.log_level, component=component)


__all__ = ["JsonLoggerFactory"]
