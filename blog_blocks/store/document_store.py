"""Lightweight orchestration layer that composes repository primitives."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from blog_blocks.config import BlogApiConfig
from blog_blocks.editor.codec import is_block_content, parse_blocks, serialize_blocks
from blog_blocks.editor.sequence import BlockSequence
from blog_blocks.models.blocks import CodeLanguage
from blog_blocks.models.document import Document, DocumentRecord, RecordTimestamp
from blog_blocks.repositories.base import (
    ApiError,
    DocumentNotFoundError,
    DocumentRepository,
    RepositoryError,
)

logger = logging.getLogger(__name__)


class DocumentStoreError(RuntimeError):
    """Raised when DocumentStore operations encounter invalid state."""


@dataclass(slots=True)
class DocumentNode:
    """A document and the sub-documents loaded beneath it."""

    document: Document
    children: list[DocumentNode] = field(default_factory=list)


class DocumentStore:
    """Thin façade around a repository that loads, saves and organises documents."""

    def __init__(self, repository: DocumentRepository, *, config: BlogApiConfig | None = None):
        """Internal constructor; prefer ``create_document_store`` for public use."""
        self._repository = repository
        self._config = config or BlogApiConfig()

    @property
    def default_language(self) -> CodeLanguage:
        return self._config.default_code_language

    # ------------------------------------------------------------------ Queries
    def new_document(self, *, parent_id: int | None = None) -> Document:
        """Return an unsaved document holding one empty text block."""
        return Document(blocks=BlockSequence(default_language=self.default_language), parent_id=parent_id)

    def load_document(self, document_id: int) -> Document:
        with self._translate_errors("Failed to fetch blog data"):
            record = self._repository.get_document(document_id)
        return self._to_document(record)

    def list_root_documents(self) -> list[Document]:
        with self._translate_errors("Failed to fetch blogs"):
            records = self._repository.list_documents()
        return [self._to_document(record) for record in records]

    def list_sub_documents(self, parent_id: int) -> list[Document]:
        with self._translate_errors("Failed to fetch sub-blogs"):
            records = self._repository.list_documents(parent_id)
        return [self._to_document(record) for record in records]

    def get_document_tree(self, document_id: int, *, depth: int | None = 1) -> DocumentNode:
        """Return ``document_id`` with sub-documents loaded ``depth`` levels down (``None`` = all)."""
        if depth is not None and depth < 0:
            raise ValueError("Depth must be a non-negative integer or None.")
        root = DocumentNode(self.load_document(document_id))
        seen = {document_id}
        frontier = [root]
        level = 0
        while frontier and (depth is None or level < depth):
            next_frontier: list[DocumentNode] = []
            for node in frontier:
                for child in self.list_sub_documents(node.document.document_id):
                    if child.document_id in seen:
                        continue
                    seen.add(child.document_id)
                    child_node = DocumentNode(child)
                    node.children.append(child_node)
                    next_frontier.append(child_node)
            frontier = next_frontier
            level += 1
        return root

    # ----------------------------------------------------------- Mutating ops
    def save_document(self, document: Document) -> Document:
        """Create or update ``document`` and return the saved copy; the input is left as is."""
        if not document.title.strip():
            raise DocumentStoreError("Blog title is required")

        if document.document_id is None:
            record = document.to_record().model_copy(update={"created_at": RecordTimestamp.now()})
            if document.parent_id is not None:
                self._require_parent(document.parent_id)
            with self._translate_errors("Failed to save blog"):
                saved = self._repository.create_document(record)
            logger.info("Created document %s", saved.blog_id)
        else:
            self._check_parent(document.document_id, document.parent_id)
            with self._translate_errors("Failed to update blog"):
                saved = self._repository.update_document(document.document_id, document.to_record())
            logger.info("Updated document %s", saved.blog_id)

        return document.copy(
            document_id=saved.blog_id,
            created_at=saved.created_at or document.created_at,
            parent_id=saved.parent_blog,
        )

    def delete_documents(self, document_ids: Sequence[int]) -> None:
        ids = list(dict.fromkeys(document_ids))
        if not ids:
            return
        with self._translate_errors("Failed to delete blog"):
            self._repository.delete_documents(ids)
        logger.info("Deleted documents %s", ids)

    def migrate_legacy_content(self, document_ids: Sequence[int] | None = None) -> list[int]:
        """Rewrite non-block ``content`` as block JSON; returns the migrated ids."""
        if document_ids is None:
            records = self._all_records()
        else:
            with self._translate_errors("Failed to fetch blog data"):
                records = [self._repository.get_document(document_id) for document_id in document_ids]

        migrated: list[int] = []
        for record in records:
            if is_block_content(record.content):
                continue
            blocks = parse_blocks(record.content, default_language=self.default_language)
            updated = record.model_copy(update={"content": serialize_blocks(blocks)})
            with self._translate_errors("Failed to update blog"):
                self._repository.update_document(record.blog_id, updated)
            migrated.append(record.blog_id)
            logger.info("Migrated legacy content of document %s", record.blog_id)
        return migrated

    # ----------------------------------------------------------------- Helpers
    def _to_document(self, record: DocumentRecord) -> Document:
        return Document.from_record(record, default_language=self.default_language)

    def _all_records(self) -> list[DocumentRecord]:
        with self._translate_errors("Failed to fetch blogs"):
            pending = list(self._repository.list_documents())
            records: list[DocumentRecord] = []
            seen: set[int] = set()
            while pending:
                record = pending.pop(0)
                if record.blog_id in seen:
                    continue
                seen.add(record.blog_id)
                records.append(record)
                pending.extend(self._repository.list_documents(record.blog_id))
        return records

    def _require_parent(self, parent_id: int) -> DocumentRecord:
        try:
            return self._repository.get_document(parent_id)
        except DocumentNotFoundError as exc:
            raise DocumentStoreError(f"Parent blog {parent_id} does not exist") from exc
        except RepositoryError as exc:
            raise DocumentStoreError(_user_message(exc, "Failed to fetch blog data")) from exc

    def _check_parent(self, document_id: int, parent_id: int | None) -> None:
        """Reject a parent that is the document itself or one of its descendants."""
        seen: set[int] = set()
        current = parent_id
        while current is not None:
            if current == document_id:
                raise DocumentStoreError("A blog cannot be nested under itself or its sub-blogs")
            if current in seen:
                break
            seen.add(current)
            current = self._require_parent(current).parent_blog

    @contextmanager
    def _translate_errors(self, fallback: str) -> Iterator[None]:
        try:
            yield
        except DocumentNotFoundError as exc:
            raise DocumentStoreError(str(exc)) from exc
        except RepositoryError as exc:
            logger.warning("%s: %s", fallback, exc)
            raise DocumentStoreError(_user_message(exc, fallback)) from exc


def _user_message(exc: RepositoryError, fallback: str) -> str:
    if isinstance(exc, ApiError) and exc.message:
        return exc.message
    return fallback


__all__ = ["DocumentNode", "DocumentStore", "DocumentStoreError"]
