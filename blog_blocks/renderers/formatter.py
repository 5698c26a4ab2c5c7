"""Canonical formatted shape of blocks for display layers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from blog_blocks.editor.metadata import DocumentMetadata, generate_metadata
from blog_blocks.models.blocks import (
    Block,
    BlockType,
    CodeBlock,
    CodeLanguage,
    ListBlock,
    ListType,
)

from .sanitize import render_lines, render_markdown


class FormattedCode(BaseModel):
    code: str
    language: CodeLanguage

    model_config = ConfigDict(frozen=True)


class FormattedList(BaseModel):
    items: list[str]
    type: ListType

    model_config = ConfigDict(frozen=True)


FormattedContent = Union[list[str], str, FormattedCode, FormattedList]


class FormattedBlock(BaseModel):
    """A block plus its display-ready ``formattedContent``.

    ``formattedContent`` is typed per block kind: sanitized HTML fragments
    (one per line) for text, a sanitized HTML string for header and quote,
    the URL for image, ``{code, language}`` for code and ``{items, type}``
    for list.
    """

    id: str
    type: BlockType
    content: str
    order: int
    language: CodeLanguage | None = None
    list_type: ListType | None = Field(default=None, alias="listType")
    formatted_content: FormattedContent = Field(alias="formattedContent")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class BlogFormatter:
    """Turn blocks into :class:`FormattedBlock` values and derive metadata."""

    def format_content(self, blocks: Iterable[Block]) -> list[FormattedBlock]:
        return [self.format_block(block) for block in blocks]

    def format_block(self, block: Block) -> FormattedBlock:
        fields = block.model_dump(by_alias=False)
        return FormattedBlock(**fields, formatted_content=self._format(block))

    def generate_metadata(self, blocks: Iterable[Block]) -> DocumentMetadata:
        return generate_metadata(blocks)

    def _format(self, block: Block) -> FormattedContent:
        if block.type is BlockType.TEXT:
            return render_lines(block.content)
        if block.type in {BlockType.HEADER, BlockType.QUOTE}:
            return render_markdown(block.content)
        if isinstance(block, CodeBlock):
            return FormattedCode(code=block.content.strip(), language=block.language)
        if isinstance(block, ListBlock):
            return FormattedList(
                items=[render_markdown(item) for item in block.items],
                type=block.list_type,
            )
        return block.content


__all__ = [
    "BlogFormatter",
    "FormattedBlock",
    "FormattedCode",
    "FormattedContent",
    "FormattedList",
]
