"""Document repository backed by the REST ``/blog`` endpoints."""

from __future__ import annotations

import logging
from typing import Any, Sequence

import httpx
from pydantic import ValidationError

from blog_blocks.models.document import DocumentRecord

from .base import ApiError, DocumentNotFoundError, RepositoryError

logger = logging.getLogger(__name__)

# ``GET /blog?id=-1`` lists top-level documents.
ROOT_QUERY_ID = -1


class RestDocumentRepository:
    """Reads and writes document records through an authenticated ``httpx.Client``."""

    def __init__(self, client: httpx.Client):
        self._client = client

    def get_document(self, document_id: int) -> DocumentRecord:
        for record in self._fetch({"id": document_id}):
            if record.blog_id == document_id:
                return record
        raise DocumentNotFoundError(f"Document {document_id} does not exist.")

    def list_documents(self, parent_id: int | None = None) -> list[DocumentRecord]:
        """Return top-level documents, or the direct children of ``parent_id``."""
        if parent_id is None:
            return [record for record in self._fetch({"id": ROOT_QUERY_ID}) if record.parent_blog is None]
        return [record for record in self._fetch({"parentBlog": parent_id}) if record.blog_id != parent_id]

    def create_document(self, record: DocumentRecord) -> DocumentRecord:
        response = self._request(
            "POST", "/blog", json=record.to_payload(include_id=False), fallback="Failed to save blog"
        )
        return self._written_record(response, record)

    def update_document(self, document_id: int, record: DocumentRecord) -> DocumentRecord:
        updated = record.model_copy(update={"blog_id": document_id})
        response = self._request(
            "PUT", f"/blog/{document_id}", json=updated.to_payload(), fallback="Failed to update blog"
        )
        return self._written_record(response, updated)

    def delete_documents(self, document_ids: Sequence[int]) -> None:
        ids = list(document_ids)
        if not ids:
            return
        self._request("DELETE", "/blog", json={"blogIds": ids}, fallback="Failed to delete blog")

    # ----------------------------------------------------------------- Helpers
    def _fetch(self, params: dict[str, Any]) -> list[DocumentRecord]:
        response = self._request("GET", "/blog", params=params, fallback="Failed to fetch blog data")
        body = self._json(response)
        entries = body.get("blogs") if isinstance(body, dict) else body
        if entries is None:
            return []
        if not isinstance(entries, list):
            raise RepositoryError("Backend returned an unexpected blog listing.")
        try:
            return [DocumentRecord.model_validate(entry) for entry in entries]
        except ValidationError as exc:
            raise RepositoryError("Backend returned a malformed blog record.") from exc

    def _written_record(self, response: httpx.Response, sent: DocumentRecord) -> DocumentRecord:
        """Prefer the record echoed by the backend; fall back to what was sent."""
        try:
            body = response.json() if response.content else None
        except ValueError:
            body = None
        if isinstance(body, dict):
            candidate = body.get("blog") if isinstance(body.get("blog"), dict) else body
            if "blogID" in candidate and "blogName" in candidate:
                try:
                    return DocumentRecord.model_validate(candidate)
                except ValidationError:
                    logger.warning("Ignoring malformed blog record in write response")
            for key in ("blogID", "id"):
                value = candidate.get(key)
                if isinstance(value, int) and not isinstance(value, bool):
                    return sent.model_copy(update={"blog_id": value})
        return sent

    def _request(self, method: str, url: str, *, fallback: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError(fallback) from exc
        if response.is_error:
            logger.warning("%s %s returned %s", method, url, response.status_code)
            raise ApiError.from_response(response, fallback=fallback)
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise RepositoryError("Backend returned a non-JSON response.") from exc


__all__ = ["ROOT_QUERY_ID", "RestDocumentRepository"]
