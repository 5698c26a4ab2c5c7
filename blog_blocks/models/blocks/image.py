"""Image block definition."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import Block, BlockType


class ImageBlock(Block):
    type: Literal[BlockType.IMAGE] = Field(default=BlockType.IMAGE, frozen=True)

    @property
    def url(self) -> str:
        return self.content.strip()


__all__ = ["ImageBlock"]
