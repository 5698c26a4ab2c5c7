"""Document store orchestration helpers."""

from .document_store import DocumentNode, DocumentStore, DocumentStoreError
from .factory import create_document_store

__all__ = ["DocumentNode", "DocumentStore", "DocumentStoreError", "create_document_store"]
