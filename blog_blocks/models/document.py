"""Document aggregate and its wire record."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .blocks import DEFAULT_CODE_LANGUAGE, CodeLanguage

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from blog_blocks.editor.metadata import DocumentMetadata
    from blog_blocks.editor.sequence import BlockSequence


class RecordTimestamp(BaseModel):
    """Protobuf-style timestamp used by the backend (``{seconds, nanos}``)."""

    seconds: int
    nanos: int = Field(default=0, ge=0, lt=1_000_000_000)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_datetime(cls, value: datetime) -> RecordTimestamp:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        epoch_micros = round(value.timestamp() * 1_000_000)
        seconds, micros = divmod(epoch_micros, 1_000_000)
        return cls(seconds=seconds, nanos=micros * 1_000)

    @classmethod
    def now(cls) -> RecordTimestamp:
        return cls.from_datetime(datetime.now(timezone.utc))

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.seconds + self.nanos / 1_000_000_000, tz=timezone.utc)


class DocumentRecord(BaseModel):
    """Persisted shape of a document as exchanged with the backend."""

    blog_id: int | None = Field(default=None, alias="blogID")
    blog_name: str | None = Field(default=None, alias="blogName")
    blog_description: str | None = Field(default=None, alias="blogDescription")
    content: str = ""
    dp_url: str | None = Field(default=None, alias="dpURL")
    image_path: str | None = Field(default=None, alias="imagePath")
    parent_blog: int | None = Field(default=None, alias="parentBlog")
    created_at: RecordTimestamp | None = Field(default=None, alias="createdAt")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("content", mode="before")
    @classmethod
    def _null_content(cls, value):
        return "" if value is None else value

    def to_payload(self, *, include_id: bool = True) -> dict:
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=False)
        if not include_id or self.blog_id is None:
            payload.pop("blogID", None)
        if self.created_at is None:
            payload.pop("createdAt", None)
        return payload


def _new_sequence() -> BlockSequence:
    from blog_blocks.editor.sequence import BlockSequence

    return BlockSequence()


@dataclass(slots=True)
class Document:
    """An article: title, description, cover image, parent reference and block body."""

    title: str = ""
    description: str = ""
    blocks: BlockSequence = field(default_factory=_new_sequence)
    cover_url: str | None = None
    parent_id: int | None = None
    document_id: int | None = None
    image_path: str | None = None
    created_at: RecordTimestamp | None = None

    @property
    def is_sub_document(self) -> bool:
        return self.parent_id is not None

    @property
    def metadata(self) -> DocumentMetadata:
        return self.blocks.metadata()

    @classmethod
    def from_record(
        cls,
        record: DocumentRecord,
        *,
        default_language: CodeLanguage | str = DEFAULT_CODE_LANGUAGE,
    ) -> Document:
        from blog_blocks.editor.sequence import BlockSequence

        return cls(
            title=record.blog_name or "",
            description=record.blog_description or "",
            blocks=BlockSequence.deserialize(record.content, default_language=default_language),
            cover_url=record.dp_url or None,
            parent_id=record.parent_blog,
            document_id=record.blog_id,
            image_path=record.image_path or None,
            created_at=record.created_at,
        )

    def to_record(self) -> DocumentRecord:
        return DocumentRecord(
            blog_id=self.document_id,
            blog_name=self.title,
            blog_description=self.description,
            content=self.blocks.serialize(),
            dp_url=self.cover_url or "",
            image_path=self.image_path or "",
            parent_blog=self.parent_id,
            created_at=self.created_at,
        )

    def copy(self, **changes) -> Document:
        """Return a copy with an independent block sequence."""
        changes.setdefault("blocks", self.blocks.copy())
        return replace(self, **changes)


__all__ = ["Document", "DocumentRecord", "RecordTimestamp"]
