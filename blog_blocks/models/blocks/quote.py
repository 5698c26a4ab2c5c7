"""Quote block definition."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import Block, BlockType


class QuoteBlock(Block):
    type: Literal[BlockType.QUOTE] = Field(default=BlockType.QUOTE, frozen=True)


__all__ = ["QuoteBlock"]
