"""SQLAlchemy declarative schema for stored documents."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for SQLAlchemy declarative mappings."""


class DbDocument(Base):
    """ORM mapping for a blog document record."""

    __tablename__ = "blogs"
    __table_args__ = (Index("ix_blogs_parent", "parent_blog"),)

    blog_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    blog_name: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    blog_description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    # Serialized block JSON, or legacy plain content awaiting migration.
    content: Mapped[str] = mapped_column(Text, default="", nullable=False)
    dp_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    image_path: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    parent_blog: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("blogs.blog_id", ondelete="CASCADE"), nullable=True
    )
    created_seconds: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    created_nanos: Mapped[int | None] = mapped_column(Integer, nullable=True)
    last_edited_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


def create_all(engine: Engine) -> None:
    """Create database tables for the schema."""
    Base.metadata.create_all(engine, checkfirst=True)


__all__ = ["Base", "DbDocument", "create_all"]
