"""Typed block exports and helpers."""

from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import Field

from .base import (
    DEFAULT_CODE_LANGUAGE,
    PROSE_TYPES,
    Block,
    BlockType,
    CodeLanguage,
    ListType,
    new_block_id,
)
from .code import CodeBlock
from .header import HeaderBlock
from .image import ImageBlock
from .list_block import ListBlock
from .quote import QuoteBlock
from .text import TextBlock

AnyBlock = Annotated[
    Union[
        TextBlock,
        HeaderBlock,
        CodeBlock,
        QuoteBlock,
        ListBlock,
        ImageBlock,
    ],
    Field(discriminator="type"),
]

BLOCK_CLASS_MAP: dict[BlockType, type[Block]] = {
    BlockType.TEXT: TextBlock,
    BlockType.HEADER: HeaderBlock,
    BlockType.CODE: CodeBlock,
    BlockType.QUOTE: QuoteBlock,
    BlockType.LIST: ListBlock,
    BlockType.IMAGE: ImageBlock,
}


def block_class_for(block_type: BlockType | str) -> type[Block]:
    normalized = BlockType(block_type) if not isinstance(block_type, BlockType) else block_type
    return BLOCK_CLASS_MAP[normalized]


def create_block(
    block_type: BlockType | str,
    *,
    content: str = "",
    order: int = 0,
    block_id: str | None = None,
    language: CodeLanguage | str | None = None,
    list_type: ListType | str | None = None,
) -> Block:
    """Build a block of ``block_type`` carrying only the fields its type uses."""
    block_cls = block_class_for(block_type)
    fields: dict[str, Any] = {"content": content, "order": order}
    if block_id is not None:
        fields["id"] = block_id
    if block_cls is CodeBlock and language is not None:
        fields["language"] = CodeLanguage(language)
    if block_cls is ListBlock and list_type is not None:
        fields["list_type"] = ListType(list_type)
    return block_cls(**fields)


__all__ = [
    "AnyBlock",
    "BLOCK_CLASS_MAP",
    "Block",
    "BlockType",
    "CodeBlock",
    "CodeLanguage",
    "DEFAULT_CODE_LANGUAGE",
    "HeaderBlock",
    "ImageBlock",
    "ListBlock",
    "ListType",
    "PROSE_TYPES",
    "QuoteBlock",
    "TextBlock",
    "block_class_for",
    "create_block",
    "new_block_id",
]
