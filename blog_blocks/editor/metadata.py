"""Read-only metadata derived from a block sequence (display only)."""

from __future__ import annotations

import math
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from blog_blocks.models.blocks import PROSE_TYPES, Block, BlockType

WORDS_PER_MINUTE = 200


class ReadingTime(BaseModel):
    minutes: int = Field(ge=0)
    text: str

    model_config = ConfigDict(frozen=True)


class DocumentMetadata(BaseModel):
    word_count: int = Field(alias="wordCount", ge=0)
    reading_time: ReadingTime = Field(alias="readingTime")
    has_code: bool = Field(alias="hasCode")
    has_images: bool = Field(alias="hasImages")
    block_types: tuple[BlockType, ...] = Field(alias="blockTypes")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


def count_words(blocks: Iterable[Block]) -> int:
    """Count whitespace-delimited tokens across text, header and quote blocks."""
    return sum(len(block.content.split()) for block in blocks if block.type in PROSE_TYPES)


def reading_time(word_count: int) -> ReadingTime:
    minutes = math.ceil(word_count / WORDS_PER_MINUTE)
    return ReadingTime(minutes=minutes, text=f"{minutes} min read")


def generate_metadata(blocks: Iterable[Block]) -> DocumentMetadata:
    materialized = list(blocks)
    word_count = count_words(materialized)
    return DocumentMetadata(
        word_count=word_count,
        reading_time=reading_time(word_count),
        has_code=any(block.type is BlockType.CODE for block in materialized),
        has_images=any(block.type is BlockType.IMAGE for block in materialized),
        block_types=tuple(dict.fromkeys(block.type for block in materialized)),
    )


__all__ = [
    "DocumentMetadata",
    "ReadingTime",
    "WORDS_PER_MINUTE",
    "count_words",
    "generate_metadata",
    "reading_time",
]
