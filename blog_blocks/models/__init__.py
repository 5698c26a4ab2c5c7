"""Block and document models."""

from .blocks import Block, BlockType, CodeLanguage, ListType
from .document import Document, DocumentRecord, RecordTimestamp

__all__ = [
    "Block",
    "BlockType",
    "CodeLanguage",
    "Document",
    "DocumentRecord",
    "ListType",
    "RecordTimestamp",
]
