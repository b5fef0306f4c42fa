"""SQLAlchemy adapter – schemas, SQL predicates, queryable and search repository."""
from listquery.adapters.sqlalchemy.mixins import AuditMixin, SoftDeleteMixin
from listquery.adapters.sqlalchemy.predicate import compile_predicate
from listquery.adapters.sqlalchemy.queryable import SqlAlchemyQuery
from listquery.adapters.sqlalchemy.repository import SqlAlchemySearchRepository
from listquery.adapters.sqlalchemy.schema import schema_for_model, schema_from_model
from listquery.adapters.sqlalchemy.session import SqlAlchemySessionFactory

__all__ = [
    "AuditMixin",
    "SoftDeleteMixin",
    "SqlAlchemyQuery",
    "SqlAlchemySearchRepository",
    "SqlAlchemySessionFactory",
    "compile_predicate",
    "schema_for_model",
    "schema_from_model",
]
