"""Application pagination – page window and list response."""
from listquery.application.pagination.response import ListResponse
from listquery.application.pagination.window import PageWindow

__all__ = ["ListResponse", "PageWindow"]
