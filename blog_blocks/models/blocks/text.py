"""Text block definition."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import Block, BlockType


class TextBlock(Block):
    type: Literal[BlockType.TEXT] = Field(default=BlockType.TEXT, frozen=True)


__all__ = ["TextBlock"]
