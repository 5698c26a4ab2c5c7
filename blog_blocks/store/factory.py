"""Factory helpers for constructing the document store façade."""

from __future__ import annotations

import httpx
from sqlalchemy.orm import Session, sessionmaker

from blog_blocks.client import create_http_client
from blog_blocks.config import BlogApiConfig
from blog_blocks.repositories import RestDocumentRepository, SqlDocumentRepository

from .document_store import DocumentStore


def create_document_store(
    session_factory: sessionmaker[Session] | None = None,
    *,
    client: httpx.Client | None = None,
    config: BlogApiConfig | None = None,
) -> DocumentStore:
    """Build a DocumentStore over SQL when a session factory is given, else over the REST backend."""
    if session_factory is not None and client is not None:
        raise ValueError("Provide either 'session_factory' or 'client', not both.")
    cfg = config or BlogApiConfig()
    if session_factory is not None:
        return DocumentStore(SqlDocumentRepository(session_factory), config=cfg)
    return DocumentStore(RestDocumentRepository(client or create_http_client(cfg)), config=cfg)


__all__ = ["create_document_store"]
