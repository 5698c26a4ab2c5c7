"""Shared building blocks for typed article blocks."""

from __future__ import annotations

from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class BlockType(str, Enum):
    TEXT = "text"
    HEADER = "header"
    CODE = "code"
    QUOTE = "quote"
    LIST = "list"
    IMAGE = "image"


class CodeLanguage(str, Enum):
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    TYPESCRIPT = "typescript"
    HTML = "html"
    CSS = "css"
    JAVA = "java"
    CPP = "c++"
    RUBY = "ruby"
    PHP = "php"
    PLAINTEXT = "plaintext"


class ListType(str, Enum):
    BULLET = "bullet"
    NUMBER = "number"


DEFAULT_CODE_LANGUAGE = CodeLanguage.JAVASCRIPT

# Block types whose content counts as prose.
PROSE_TYPES = frozenset({BlockType.TEXT, BlockType.HEADER, BlockType.QUOTE})


def new_block_id() -> str:
    return str(uuid4())


class Block(BaseModel):
    """Immutable representation of one unit of article content."""

    id: str = Field(default_factory=new_block_id, min_length=1)
    type: BlockType
    content: str = ""
    order: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_empty(self) -> bool:
        return not self.content.strip()


__all__ = [
    "Block",
    "BlockType",
    "CodeLanguage",
    "DEFAULT_CODE_LANGUAGE",
    "ListType",
    "PROSE_TYPES",
    "new_block_id",
]
