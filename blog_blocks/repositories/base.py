"""Repository protocol and errors shared by document backends."""

from __future__ import annotations

from typing import Protocol, Sequence

import httpx

from blog_blocks.models.document import DocumentRecord


class RepositoryError(RuntimeError):
    """Base class for repository-level errors."""


class DocumentNotFoundError(RepositoryError):
    """Raised when a document cannot be found for a requested operation."""


class ApiError(RepositoryError):
    """Raised when the backend answers with an error status or cannot be reached."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @classmethod
    def from_response(cls, response: httpx.Response, *, fallback: str) -> ApiError:
        message = fallback
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
            message = body["message"]
        return cls(message, status_code=response.status_code)


class DocumentRepository(Protocol):
    def get_document(self, document_id: int) -> DocumentRecord:
        ...

    def list_documents(self, parent_id: int | None = None) -> list[DocumentRecord]:
        ...

    def create_document(self, record: DocumentRecord) -> DocumentRecord:
        ...

    def update_document(self, document_id: int, record: DocumentRecord) -> DocumentRecord:
        ...

    def delete_documents(self, document_ids: Sequence[int]) -> None:
        ...


__all__ = [
    "ApiError",
    "DocumentNotFoundError",
    "DocumentRepository",
    "RepositoryError",
]
