"""Document repositories: REST backend and SQL persistence."""

from .base import ApiError, DocumentNotFoundError, DocumentRepository, RepositoryError
from .rest_repository import RestDocumentRepository
from .sql_repository import SqlDocumentRepository

__all__ = [
    "ApiError",
    "DocumentNotFoundError",
    "DocumentRepository",
    "RepositoryError",
    "RestDocumentRepository",
    "SqlDocumentRepository",
]
