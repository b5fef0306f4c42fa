"""
listquery – generic string-driven filtering, sorting and paging of entity collections.

Import path convention::

    from listquery.application.search import SearchOrchestrator, SearchRequest
    from listquery.kernel.fields import EntitySchema, schema_for
    from listquery.kernel.errors import FieldNotFoundError
    from listquery.adapters.sqlalchemy import SqlAlchemySearchRepository
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
