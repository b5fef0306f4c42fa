"""Observability – structured logging helpers."""
from listquery.observability.logging.factory import JsonLoggerFactory
from listquery.observability.logging.processors import add_component, get_logger

__all__ = ["JsonLoggerFactory", "add_component", "get_logger"]
