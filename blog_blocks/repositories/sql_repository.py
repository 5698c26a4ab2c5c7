"""SQLAlchemy-backed repository for document records."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, sessionmaker

from blog_blocks.db.schema import DbDocument
from blog_blocks.models.document import DocumentRecord, RecordTimestamp

from .base import DocumentNotFoundError, RepositoryError


class SqlDocumentRepository:
    """Repository that persists and hydrates document records from the database."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def get_document(self, document_id: int) -> DocumentRecord:
        with self._session_factory() as session:
            row = session.get(DbDocument, document_id)
            if row is None:
                raise DocumentNotFoundError(f"Document {document_id} does not exist.")
            return self._to_record(row)

    def list_documents(self, parent_id: int | None = None) -> list[DocumentRecord]:
        """Return top-level documents, or the direct children of ``parent_id``."""
        with self._session_factory() as session:
            query = select(DbDocument).order_by(DbDocument.blog_id)
            if parent_id is None:
                query = query.where(DbDocument.parent_blog.is_(None))
            else:
                query = query.where(DbDocument.parent_blog == parent_id)
            rows = session.scalars(query).all()
        return [self._to_record(row) for row in rows]

    def create_document(self, record: DocumentRecord) -> DocumentRecord:
        with self._session_factory() as session:
            self._require_parent(session, record.parent_blog)
            row = DbDocument(**self._to_row(record))
            session.add(row)
            session.commit()
            return self._to_record(row)

    def update_document(self, document_id: int, record: DocumentRecord) -> DocumentRecord:
        if record.parent_blog == document_id:
            raise RepositoryError("A document cannot be its own parent.")
        with self._session_factory() as session:
            row = session.get(DbDocument, document_id)
            if row is None:
                raise DocumentNotFoundError(f"Document {document_id} does not exist.")
            self._require_parent(session, record.parent_blog)
            values = self._to_row(record)
            if record.created_at is None:
                # Keep the original creation stamp.
                values.pop("created_seconds")
                values.pop("created_nanos")
            for key, value in values.items():
                setattr(row, key, value)
            session.commit()
            return self._to_record(row)

    def delete_documents(self, document_ids: Sequence[int]) -> None:
        """Delete documents together with every sub-document beneath them."""
        ids = set(document_ids)
        if not ids:
            return
        with self._session_factory() as session:
            found = set(session.scalars(select(DbDocument.blog_id).where(DbDocument.blog_id.in_(ids))))
            missing = ids - found
            if missing:
                raise DocumentNotFoundError(f"Documents do not exist: {sorted(missing)}")

            # Collected explicitly so backends without cascading foreign keys behave the same.
            doomed = set(found)
            frontier = set(found)
            while frontier:
                children = set(
                    session.scalars(
                        select(DbDocument.blog_id).where(DbDocument.parent_blog.in_(frontier))
                    )
                )
                frontier = children - doomed
                doomed |= frontier

            session.execute(delete(DbDocument).where(DbDocument.blog_id.in_(doomed)))
            session.commit()

    # ----------------------------------------------------------------- Helpers
    @staticmethod
    def _require_parent(session: Session, parent_id: int | None) -> None:
        if parent_id is not None and session.get(DbDocument, parent_id) is None:
            raise DocumentNotFoundError(f"Parent document {parent_id} does not exist.")

    @staticmethod
    def _to_row(record: DocumentRecord) -> dict:
        created = record.created_at
        return {
            "blog_name": record.blog_name or "",
            "blog_description": record.blog_description or "",
            "content": record.content,
            "dp_url": record.dp_url,
            "image_path": record.image_path,
            "parent_blog": record.parent_blog,
            "created_seconds": created.seconds if created else None,
            "created_nanos": created.nanos if created else None,
        }

    @staticmethod
    def _to_record(row: DbDocument) -> DocumentRecord:
        created = None
        if row.created_seconds is not None:
            created = RecordTimestamp(seconds=row.created_seconds, nanos=row.created_nanos or 0)
        return DocumentRecord(
            blog_id=row.blog_id,
            blog_name=row.blog_name,
            blog_description=row.blog_description,
            content=row.content,
            dp_url=row.dp_url,
            image_path=row.image_path,
            parent_blog=row.parent_blog,
            created_at=created,
        )


__all__ = ["SqlDocumentRepository"]
