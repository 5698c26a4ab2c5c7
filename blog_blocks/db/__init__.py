"""Database engine and schema for the SQL document repository."""

from .engine import create_engine, create_session_factory
from .schema import Base, DbDocument, create_all

__all__ = ["Base", "DbDocument", "create_all", "create_engine", "create_session_factory"]
